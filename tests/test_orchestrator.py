from __future__ import annotations

import json

import pytest

from shortspark.cli import main
from shortspark.orchestrator import AgentBundle, StudioOrchestrator


def test_run_builds_all_four_outputs(sample_brief):
    bundle = StudioOrchestrator.default().run(sample_brief)
    assert isinstance(bundle, AgentBundle)
    assert bundle.brief == sample_brief
    assert "AI tools for creators" in bundle.idea.hook
    assert "grow your channel fast" in bundle.script.beats[-1].line
    assert len({beat.shot_type for beat in bundle.visuals.beats}) >= 2
    assert "#shortsparkstudio" in bundle.distribution.hashtags


def test_run_payload_normalizes_first():
    bundle = StudioOrchestrator.default().run_payload({"topic": "  Bike repair ", "duration": "999"})
    assert bundle.brief.topic == "Bike repair"
    assert bundle.brief.duration == 60
    assert bundle.script.beats[-1].timestamp == "00:50"


def test_from_file_uses_config(tmp_path, sample_brief):
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"hashtag_limit": 2, "default_duration": 20}), encoding="utf-8")
    orchestrator = StudioOrchestrator.from_file(path)
    assert orchestrator.run(sample_brief).distribution.hashtags == ("#shortsparkstudio", "#shortspark")
    assert orchestrator.run_payload({"topic": "Chess"}).brief.duration == 20


def test_cli_writes_bundle(tmp_path, capsys):
    main(["--sample", "--output-dir", str(tmp_path)])
    output_path = tmp_path / "ai-tools-for-creators" / "bundle.json"
    assert output_path.exists()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert set(payload) == {"brief", "idea", "script", "visuals", "distribution"}
    assert payload["script"]["beats"][-1]["role"] == "call-to-action"
    assert str(output_path) in capsys.readouterr().out


def test_cli_flags_override_brief_file(tmp_path, capsys):
    brief_path = tmp_path / "brief.json"
    brief_path.write_text('{"topic": "Budget travel", "tone": "playful", "duration": 5,}', encoding="utf-8")
    main(["--brief", str(brief_path), "--goal", "see Lisbon for less", "--stdout"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["brief"]["topic"] == "Budget travel"
    assert payload["brief"]["goal"] == "see Lisbon for less"
    assert payload["brief"]["duration"] == 15
    assert payload["idea"]["hook"].startswith("Plot twist")


def test_cli_requires_some_input():
    with pytest.raises(SystemExit):
        main([])


def test_cli_brief_file_camel_case_overrides_sample(tmp_path, capsys):
    brief_path = tmp_path / "brief.json"
    brief_path.write_text('{"brandKeywords": "Trail Mix Media"}', encoding="utf-8")
    main(["--sample", "--brief", str(brief_path), "--stdout"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["brief"]["brand_keywords"] == "Trail Mix Media"
    assert payload["brief"]["topic"] == "AI tools for creators"


def test_cli_rejects_malformed_yaml_brief(tmp_path):
    brief_path = tmp_path / "brief.yaml"
    brief_path.write_text("topic: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--brief", str(brief_path), "--stdout"])
    assert excinfo.value.code == 2


def test_cli_rejects_malformed_yaml_config(tmp_path):
    config_path = tmp_path / "engine.yaml"
    config_path.write_text("hashtag_limit: [1, 2\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--sample", "--config", str(config_path), "--stdout"])
    assert excinfo.value.code == 2


def test_cli_huge_duration_clamps(tmp_path, capsys):
    brief_path = tmp_path / "brief.json"
    brief_path.write_text('{"topic": "Kites", "duration": ' + "9" * 400 + "}", encoding="utf-8")
    main(["--brief", str(brief_path), "--stdout"])
    assert json.loads(capsys.readouterr().out)["brief"]["duration"] == 60
