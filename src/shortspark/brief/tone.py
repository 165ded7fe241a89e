from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Tone(str, Enum):
    """Closed set of tone categories the template catalogs are keyed by."""

    HIGH_ENERGY = "high-energy"
    EDUCATIONAL = "educational"
    INSPIRATIONAL = "inspirational"
    PLAYFUL = "playful"
    CALM = "calm"
    NEUTRAL = "neutral"  # fallback for anything unrecognised

    @classmethod
    def from_text(cls, text: str) -> "Tone":
        key = normalize_tone_text(text)
        if not key:
            return cls.NEUTRAL
        return TONE_ALIASES.get(key, cls.NEUTRAL)

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


def normalize_tone_text(text: str) -> str:
    return "-".join(text.strip().lower().replace("_", " ").split())


TONE_ALIASES = MappingProxyType(
    {
        **{tone.value: tone for tone in Tone},
        "highenergy": Tone.HIGH_ENERGY,
        "high": Tone.HIGH_ENERGY,
        "energetic": Tone.HIGH_ENERGY,
        "hype": Tone.HIGH_ENERGY,
        "hyped": Tone.HIGH_ENERGY,
        "upbeat": Tone.HIGH_ENERGY,
        "bold": Tone.HIGH_ENERGY,
        "informative": Tone.EDUCATIONAL,
        "explainer": Tone.EDUCATIONAL,
        "teaching": Tone.EDUCATIONAL,
        "authoritative": Tone.EDUCATIONAL,
        "motivational": Tone.INSPIRATIONAL,
        "uplifting": Tone.INSPIRATIONAL,
        "aspirational": Tone.INSPIRATIONAL,
        "funny": Tone.PLAYFUL,
        "humorous": Tone.PLAYFUL,
        "witty": Tone.PLAYFUL,
        "quirky": Tone.PLAYFUL,
        "chill": Tone.CALM,
        "relaxed": Tone.CALM,
        "soothing": Tone.CALM,
        "minimal": Tone.CALM,
    }
)
