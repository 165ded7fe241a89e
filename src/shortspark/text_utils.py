from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, Mapping

from json_repair import repair_json

TOKEN_SPLIT = re.compile(r"[^0-9a-z]+")
PHRASE_SPLIT = re.compile(r"[,;|/]+")


def slugify(text: str) -> str:
    cleaned = "".join(ch.lower() if ch.isalnum() else "-" for ch in text)
    return "-".join(filter(None, cleaned.split("-")))[:80]


def fill(template: str, slots: Mapping[str, object]) -> str:
    """Substitute brief slots into a catalog template.

    Unknown slot names raise ``KeyError`` so a broken catalog entry fails loudly
    instead of leaking a raw marker into the output.
    """
    return template.format(**slots)


def normalized_key(text: str) -> str:
    return " ".join(text.lower().split())


def dedupe(items: Iterable[str], limit: int | None = None) -> tuple[str, ...]:
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        key = normalized_key(item)
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(item.strip())
        if limit is not None and len(result) >= limit:
            break
    return tuple(result)


def slug_tokens(text: str) -> list[str]:
    return [token for token in TOKEN_SPLIT.split(text.lower()) if token]


def split_phrases(text: str) -> list[str]:
    return [phrase.strip() for phrase in PHRASE_SPLIT.split(text) if phrase.strip()]


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def load_json_with_repair(
    raw: str,
    *,
    logger: logging.Logger,
    repair_log_level: int = logging.WARNING,
) -> Any:
    """Best-effort JSON loader that repairs hand-edited payloads."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.log(
            repair_log_level,
            "Primary JSON parse failed, attempting repair: %s",
            exc,
        )
        try:
            repaired = repair_json(raw)
            return json.loads(repaired)
        except Exception as repair_exc:
            logger.error("JSON repair failed: %s", repair_exc)
            raise exc from repair_exc


def fill_sentence(template: str, slots: Mapping[str, object]) -> str:
    """Fill ``template`` and capitalize its literal opening.

    Templates that open with a slot keep the user's value exactly as given.
    """
    text = fill(template, slots)
    if template.startswith("{"):
        return text
    return capitalize_first(text)
