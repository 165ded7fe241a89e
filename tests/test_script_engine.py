from __future__ import annotations

import pytest

from shortspark.brief.model import Brief
from shortspark.brief.tone import Tone
from shortspark.errors import InvalidScheduleError
from shortspark.script_engine.generator import assign_roles, build_script
from shortspark.script_engine.model import NarrativeRole
from shortspark.script_engine.templates import ROLE_TEMPLATES, VOICEOVER_TEMPLATES

HOOK = NarrativeRole.HOOK
SETUP = NarrativeRole.SETUP
VALUE = NarrativeRole.VALUE
PROOF = NarrativeRole.PROOF
CTA = NarrativeRole.CTA


def test_catalogs_are_exhaustive():
    assert set(ROLE_TEMPLATES) == set(NarrativeRole)
    assert set(VOICEOVER_TEMPLATES) == set(Tone)


@pytest.mark.parametrize(
    "count, expected",
    [
        (2, [HOOK, CTA]),
        (3, [HOOK, VALUE, CTA]),
        (4, [HOOK, SETUP, VALUE, CTA]),
        (5, [HOOK, SETUP, VALUE, PROOF, CTA]),
        (6, [HOOK, SETUP, VALUE, VALUE, PROOF, CTA]),
        (7, [HOOK, SETUP, VALUE, VALUE, VALUE, PROOF, CTA]),
    ],
)
def test_assign_roles(count, expected):
    assert assign_roles(count) == expected


def test_assign_roles_needs_two_beats():
    with pytest.raises(InvalidScheduleError):
        assign_roles(1)


def test_sample_brief_script(sample_brief):
    script = build_script(sample_brief)
    assert len(script.beats) == 6
    final = script.beats[-1]
    assert final.role is CTA
    assert "grow your channel fast" in final.line
    assert "grow your channel fast" in final.action
    assert script.beats[0].role is HOOK
    assert script.beats[2].line.startswith("Move 1:")
    assert script.beats[3].line.startswith("Move 2:")
    assert "high-energy" in script.voiceover
    assert "55 seconds" in script.pacing


def test_short_runtime_collapses_middle_roles():
    brief = Brief(topic="Cold brew", goal="save money on coffee", duration=15)
    script = build_script(brief)
    assert [beat.role for beat in script.beats] == [HOOK, VALUE, CTA]
    assert [beat.timestamp for beat in script.beats] == ["00:00", "00:05", "00:10"]
    assert script.beats[0].line != script.beats[-1].line
    assert "hard cuts" in script.pacing
    assert "about 5 seconds" in script.pacing


def test_timestamps_strictly_increase():
    for duration in (15, 30, 45, 60):
        script = build_script(Brief(topic="Runs", duration=duration))
        stamps = [beat.timestamp for beat in script.beats]
        assert stamps == sorted(set(stamps))


def test_proof_line_keeps_brand_casing():
    brief = Brief(topic="Resale tips", brand_keywords="eBay Pros", duration=45)
    script = build_script(brief)
    proof = [beat for beat in script.beats if beat.role is PROOF]
    assert proof[0].line.startswith("eBay Pros runs")
