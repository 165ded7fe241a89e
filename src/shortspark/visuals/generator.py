from __future__ import annotations

import logging
from typing import Iterable, Sequence

from shortspark.brief.model import Brief
from shortspark.brief.tone import Tone
from shortspark.config import DEFAULT_CONFIG, EngineConfig
from shortspark.scheduler.planner import schedule
from shortspark.text_utils import dedupe, fill, fill_sentence, slug_tokens

from .model import VisualBeat, VisualPlan
from .templates import (
    B_ROLL_CATALOG,
    CLOSING_OVERLAY,
    OPENING_OVERLAY,
    SHOT_ROTATION,
    SHOT_TEMPLATES,
    TRANSITION_CATALOG,
    CatalogEntry,
)

logger = logging.getLogger(__name__)

TONE_WEIGHT = 2


def build_visual_plan(brief: Brief, config: EngineConfig = DEFAULT_CONFIG) -> VisualPlan:
    """Lay out shots per beat plus ranked b-roll and transition suggestions."""
    beats = schedule(brief.duration, config.visual_beat_count(brief.duration))
    slots = brief.slots()

    visual_beats = []
    for beat in beats:
        shot_type = SHOT_ROTATION[beat.index % len(SHOT_ROTATION)]
        template = SHOT_TEMPLATES[shot_type]
        overlay = template.overlay
        if beat.index == len(beats) - 1:
            overlay = CLOSING_OVERLAY
        elif beat.index == 0:
            overlay = OPENING_OVERLAY
        visual_beats.append(
            VisualBeat(
                timestamp=beat.timestamp,
                shot_type=shot_type,
                description=fill_sentence(template.description, slots),
                motion=fill(template.motion, slots),
                overlay=fill(overlay, slots),
            )
        )

    keywords = set(slug_tokens(f"{brief.topic} {brief.goal}"))
    tone = brief.tone_category
    b_roll = dedupe(
        (fill_sentence(entry.text, slots) for entry in rank_catalog(B_ROLL_CATALOG, keywords, tone)),
        limit=config.b_roll_limit,
    )
    transitions = dedupe(
        (entry.text for entry in rank_catalog(TRANSITION_CATALOG, keywords, tone)),
        limit=config.transition_limit,
    )
    logger.debug("Built visual plan with %s beats", len(visual_beats))
    return VisualPlan(beats=tuple(visual_beats), b_roll_ideas=b_roll, transitions=transitions)


def rank_catalog(
    catalog: Sequence[CatalogEntry], keywords: Iterable[str], tone: Tone
) -> list[CatalogEntry]:
    """Order catalog entries by keyword overlap and tone match, keeping catalog order on ties."""
    words = set(keywords)

    def score(entry: CatalogEntry) -> int:
        bonus = TONE_WEIGHT if tone in entry.tones else 0
        return len(entry.keywords & words) + bonus

    return sorted(catalog, key=score, reverse=True)
