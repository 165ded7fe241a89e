from __future__ import annotations

from shortspark.brief.model import Brief
from shortspark.brief.tone import Tone
from shortspark.config import EngineConfig
from shortspark.visuals.generator import build_visual_plan, rank_catalog
from shortspark.visuals.model import ShotType
from shortspark.visuals.templates import SHOT_ROTATION, SHOT_TEMPLATES, TRANSITION_CATALOG

FAST_CUTS = {
    "Whip pan on the beat drop",
    "Jump cut on every sentence",
    "Speed ramp into the reveal",
    "Glitch flash between beats",
}


def test_shot_catalog_is_exhaustive():
    assert set(SHOT_TEMPLATES) == set(ShotType)
    assert set(SHOT_ROTATION) == set(ShotType)


def test_sample_brief_plan(sample_brief):
    plan = build_visual_plan(sample_brief)
    shot_types = [beat.shot_type for beat in plan.beats]
    assert len(plan.beats) == 6
    assert len(set(shot_types)) >= 2
    assert all(a != b for a, b in zip(shot_types, shot_types[1:]))
    assert plan.beats[0].overlay == "Hook text: AI tools for creators"
    assert plan.beats[-1].overlay == "End card: ShortSpark Studio / grow your channel fast"


def test_high_energy_prefers_fast_cuts(sample_brief):
    plan = build_visual_plan(sample_brief)
    assert set(plan.transitions) == FAST_CUTS
    assert plan.transitions[0] == "Whip pan on the beat drop"


def test_calm_tone_prefers_soft_transitions():
    plan = build_visual_plan(Brief(topic="Morning routine", tone="calm"))
    assert plan.transitions[:2] == ("Light leak fade", "Slow cross dissolve")


def test_b_roll_ranked_by_topic_relevance(sample_brief):
    plan = build_visual_plan(sample_brief)
    assert len(plan.b_roll_ideas) == 5
    assert len(set(plan.b_roll_ideas)) == 5
    assert plan.b_roll_ideas[0] == "Over-the-shoulder shot of someone using AI tools for creators on a laptop"


def test_limits_follow_config(sample_brief):
    plan = build_visual_plan(sample_brief, EngineConfig(b_roll_limit=2, transition_limit=1))
    assert len(plan.b_roll_ideas) == 2
    assert len(plan.transitions) == 1


def test_rank_catalog_keeps_catalog_order_on_ties():
    ranked = rank_catalog(TRANSITION_CATALOG, [], Tone.NEUTRAL)
    assert ranked == list(TRANSITION_CATALOG)


def test_short_runtime_beats():
    plan = build_visual_plan(Brief(topic="Knots", duration=15))
    assert [beat.timestamp for beat in plan.beats] == ["00:00", "00:04", "00:08", "00:12"]
