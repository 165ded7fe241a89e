from __future__ import annotations

import logging
from typing import Iterable

from shortspark.brief.model import Brief
from shortspark.config import DEFAULT_CONFIG, EngineConfig
from shortspark.text_utils import dedupe, fill, fill_sentence, slug_tokens, split_phrases

from .model import DistributionPlan
from .templates import (
    CAPTION_OPENERS,
    CAPTION_TEMPLATE,
    HASHTAG_STOPWORDS,
    POSTING_CHECKLIST,
    THUMBNAIL_STYLES,
    THUMBNAIL_TEMPLATE,
)

logger = logging.getLogger(__name__)


def build_distribution_plan(brief: Brief, config: EngineConfig = DEFAULT_CONFIG) -> DistributionPlan:
    """Assemble caption, hashtags, posting checklist and thumbnail concept."""
    slots = brief.slots()
    tone = brief.tone_category

    caption = fill(CAPTION_TEMPLATE, {**slots, "opener": CAPTION_OPENERS[tone]})
    checklist = tuple(fill(step, slots) for step in POSTING_CHECKLIST)
    thumbnail = fill_sentence(THUMBNAIL_TEMPLATE, {**slots, "style": THUMBNAIL_STYLES[tone]})
    hashtags = build_hashtags(brief, config)
    logger.debug("Built distribution plan with hashtags %s", hashtags)
    return DistributionPlan(
        caption=caption,
        hashtags=hashtags,
        posting_checklist=checklist,
        thumbnail_concept=thumbnail,
    )


def build_hashtags(brief: Brief, config: EngineConfig = DEFAULT_CONFIG) -> tuple[str, ...]:
    """Derive hashtags from brand keywords, the niche set and topic words.

    Brand phrases come first as single joined tags, then their individual
    words, then the niche tags, then topic words without stopwords.
    """
    candidates: list[str] = []
    phrases = split_phrases(brief.brand_keywords)
    for phrase in phrases:
        candidates.append(_tag(slug_tokens(phrase)))
    for phrase in phrases:
        candidates.extend(_tag([token]) for token in slug_tokens(phrase))
    candidates.extend(config.niche_hashtags)
    candidates.extend(
        _tag([token]) for token in slug_tokens(brief.topic) if token not in HASHTAG_STOPWORDS
    )
    return dedupe(_valid(candidates), limit=config.hashtag_limit)


def _tag(tokens: Iterable[str]) -> str:
    return "#" + "".join(tokens)


def _valid(tags: Iterable[str]) -> Iterable[str]:
    for tag in tags:
        if len(tag) > 1:
            yield tag.lower()
