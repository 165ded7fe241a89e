from __future__ import annotations

import logging

from shortspark.brief.model import Brief
from shortspark.brief.tone import Tone
from shortspark.config import DEFAULT_CONFIG, EngineConfig
from shortspark.text_utils import dedupe, fill, fill_sentence

from .model import IdeaOutput
from .templates import (
    CONCEPT_TEMPLATE,
    HOOK_TEMPLATES,
    PAD_POINTS,
    SUPPORTING_ANGLES,
    TITLE_SUBJECT_FIELDS,
    TITLE_TEMPLATES,
)

logger = logging.getLogger(__name__)


def build_idea(brief: Brief, config: EngineConfig = DEFAULT_CONFIG) -> IdeaOutput:
    """Produce the hook, concept, supporting points and title ideas for a brief."""
    slots = brief.slots()
    tone = brief.tone_category
    if brief.tone and tone is Tone.NEUTRAL:
        logger.warning("Unrecognised tone %r; using the neutral hook catalog", brief.tone)

    hook = fill_sentence(HOOK_TEMPLATES[tone], slots)
    concept = fill(CONCEPT_TEMPLATE, slots)
    points = _supporting_points(slots, config.supporting_point_count)
    titles = _title_ideas(brief, slots, config.title_idea_limit)
    logger.debug("Built idea with %s points and %s titles", len(points), len(titles))
    return IdeaOutput(hook=hook, concept=concept, supporting_points=points, title_ideas=titles)


def _supporting_points(slots: dict, count: int) -> tuple[str, ...]:
    points = dedupe((fill(template, slots) for _, template in SUPPORTING_ANGLES), limit=count)
    if len(points) < count:
        points = dedupe((*points, *PAD_POINTS), limit=count)
    return points


def _title_ideas(brief: Brief, slots: dict, limit: int) -> tuple[str, ...]:
    subjects = [getattr(brief, name) for name in TITLE_SUBJECT_FIELDS if getattr(brief, name)]
    if not subjects:
        subjects = [slots["topic"]]

    # Walk the template x subject grid diagonally so the first picks vary both.
    candidates = []
    for offset in range(len(subjects)):
        for position, template in enumerate(TITLE_TEMPLATES):
            subject = subjects[(position + offset) % len(subjects)]
            candidates.append(
                fill_sentence(template, {"subject": subject, "duration": brief.duration})
            )
    return dedupe(candidates, limit=limit)
