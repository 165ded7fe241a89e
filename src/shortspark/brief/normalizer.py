from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from .model import MAX_DURATION_SEC, MIN_DURATION_SEC, Brief

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("topic", "audience", "tone", "goal", "brand_keywords")
CAMEL_CASE_KEYS = {"brand_keywords": "brandKeywords"}


def normalize_brief(
    topic: Any = None,
    audience: Any = None,
    tone: Any = None,
    goal: Any = None,
    brand_keywords: Any = None,
    duration: Any = None,
    *,
    default_duration: int = 30,
) -> Brief:
    """Build a valid ``Brief`` from raw form values.

    Text fields default to the empty string. ``duration`` is rounded half-up and
    clamped into the supported range; values that carry no usable number fall
    back to ``default_duration``. This function never raises for user input.
    """
    return Brief(
        topic=_clean_text(topic),
        audience=_clean_text(audience),
        tone=_clean_text(tone),
        goal=_clean_text(goal),
        brand_keywords=_clean_text(brand_keywords),
        duration=clamp_duration(duration, default=default_duration),
    )


def snake_case_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Rename known camelCase keys to their snake_case field names."""
    renamed = {camel: snake for snake, camel in CAMEL_CASE_KEYS.items()}
    return {renamed.get(key, key): value for key, value in payload.items()}


def normalize_payload(payload: Mapping[str, Any], *, default_duration: int = 30) -> Brief:
    values = {}
    for name in (*TEXT_FIELDS, "duration"):
        value = payload.get(name)
        if value is None and name in CAMEL_CASE_KEYS:
            value = payload.get(CAMEL_CASE_KEYS[name])
        values[name] = value
    return normalize_brief(**values, default_duration=default_duration)


def clamp_duration(value: Any, *, default: int = 30) -> int:
    fallback = _bound(default)
    number = _parse_number(value)
    if number is None or math.isnan(number):
        logger.debug("Duration %r is not a number; using default %s", value, fallback)
        return fallback
    if math.isinf(number):
        return MAX_DURATION_SEC if number > 0 else MIN_DURATION_SEC
    rounded = math.floor(number + 0.5)
    clamped = _bound(rounded)
    if clamped != rounded:
        logger.debug("Clamped duration %s to %s", rounded, clamped)
    return clamped


def _bound(seconds: int) -> int:
    return max(MIN_DURATION_SEC, min(MAX_DURATION_SEC, int(seconds)))


def _parse_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
