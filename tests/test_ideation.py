from __future__ import annotations

import pytest

from shortspark.brief.model import Brief
from shortspark.brief.tone import Tone
from shortspark.config import EngineConfig
from shortspark.ideation.generator import build_idea
from shortspark.ideation.templates import HOOK_TEMPLATES


def test_hook_catalog_covers_every_tone():
    assert set(HOOK_TEMPLATES) == set(Tone)


def test_sample_brief_hook_mentions_topic(sample_brief):
    idea = build_idea(sample_brief)
    assert "AI tools for creators" in idea.hook
    assert idea.hook.startswith("Stop scrolling")
    assert "ShortSpark Studio" in idea.concept
    assert "busy YouTube creators" in idea.concept


def test_unknown_tone_uses_neutral_hook(caplog):
    brief = Brief(topic="Houseplants", audience="new plant parents", tone="mysterious", goal="keep them alive")
    idea = build_idea(brief)
    assert idea.hook == "Houseplants: the simple approach new plant parents can use to keep them alive."
    assert "Unrecognised tone" in caplog.text


def test_supporting_points_are_distinct_and_sized(sample_brief):
    idea = build_idea(sample_brief)
    assert len(idea.supporting_points) == 4
    assert len(set(idea.supporting_points)) == 4
    assert idea.supporting_points[0].startswith("Name the pain")


@pytest.mark.parametrize("count", [3, 5])
def test_supporting_point_count_follows_config(sample_brief, count):
    idea = build_idea(sample_brief, EngineConfig(supporting_point_count=count))
    assert len(idea.supporting_points) == count


def test_title_ideas_are_distinct_and_capped(sample_brief):
    idea = build_idea(sample_brief)
    assert len(idea.title_ideas) == 4
    assert len({title.lower() for title in idea.title_ideas}) == 4
    assert idea.title_ideas[0] == "AI tools for creators in 55 Seconds"
    assert any("ShortSpark Studio" in title for title in idea.title_ideas)


def test_title_ideas_for_an_empty_brief():
    idea = build_idea(Brief())
    assert idea.title_ideas
    assert len(set(idea.title_ideas)) == len(idea.title_ideas)
    assert all("{" not in title for title in idea.title_ideas)


def test_user_text_keeps_its_casing_when_it_opens_a_sentence():
    brief = Brief(
        topic="iPhone photography",
        audience="new shooters",
        goal="take sharper shots",
        brand_keywords="eBay Lens Co",
    )
    idea = build_idea(brief)
    assert idea.hook == "iPhone photography: the simple approach new shooters can use to take sharper shots."
    assert idea.title_ideas[0] == "iPhone photography in 30 Seconds"
    assert "eBay Lens Co" in " ".join(idea.title_ideas)
    assert not any(title.startswith("IPhone") or "EBay" in title for title in idea.title_ideas)
