from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .tone import Tone

MIN_DURATION_SEC = 15
MAX_DURATION_SEC = 60

# Slot values used when a text field is left empty.
SLOT_FALLBACKS = MappingProxyType(
    {
        "topic": "this idea",
        "audience": "your audience",
        "tone": "confident",
        "goal": "get results",
        "brand_keywords": "your brand",
    }
)


class Brief(BaseModel):
    """Normalized creative input shared by every generator."""

    model_config = ConfigDict(frozen=True)

    topic: str = ""
    audience: str = ""
    tone: str = ""
    goal: str = ""
    brand_keywords: str = ""
    duration: int = Field(default=30, ge=MIN_DURATION_SEC, le=MAX_DURATION_SEC)

    @property
    def tone_category(self) -> Tone:
        return Tone.from_text(self.tone)

    def slots(self) -> dict[str, Any]:
        values: dict[str, Any] = {
            name: getattr(self, name) or fallback for name, fallback in SLOT_FALLBACKS.items()
        }
        values["duration"] = self.duration
        return values

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, default_duration: int = 30) -> "Brief":
        from .normalizer import normalize_payload

        return normalize_payload(payload, default_duration=default_duration)


# Default form of the studio page.
SAMPLE_BRIEF = Brief(
    topic="AI tools for creators",
    audience="busy YouTube creators",
    tone="high-energy",
    goal="grow your channel fast",
    brand_keywords="ShortSpark Studio",
    duration=55,
)
