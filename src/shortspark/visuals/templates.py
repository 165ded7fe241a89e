from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from shortspark.brief.tone import Tone

from .model import ShotType


@dataclass(frozen=True)
class ShotTemplate:
    description: str
    motion: str
    overlay: str


@dataclass(frozen=True)
class CatalogEntry:
    text: str
    keywords: frozenset[str] = frozenset()
    tones: frozenset[Tone] = frozenset()


# Consecutive entries differ, so neighbouring beats never share a shot type.
SHOT_ROTATION = (ShotType.CLOSE_UP, ShotType.WIDE, ShotType.OVERLAY_TEXT, ShotType.B_ROLL_CUT)

SHOT_TEMPLATES = MappingProxyType(
    {
        ShotType.CLOSE_UP: ShotTemplate(
            description="Tight framing on the presenter reacting to {topic} with {tone} energy, eyes to lens for {audience}.",
            motion="Handheld push-in",
            overlay="Kinetic caption of the spoken line",
        ),
        ShotType.WIDE: ShotTemplate(
            description="Wide shot of the creator workspace with {topic} visible on screen.",
            motion="Slow dolly left",
            overlay="Lower-third: {brand_keywords}",
        ),
        ShotType.OVERLAY_TEXT: ShotTemplate(
            description="Full-frame text card that spells out how {topic} helps you {goal}.",
            motion="Scale-in with a bounce",
            overlay="Headline: {goal}",
        ),
        ShotType.B_ROLL_CUT: ShotTemplate(
            description="Fast b-roll cutaway illustrating {topic} in action.",
            motion="Speed ramp into the cut",
            overlay="Progress bar ticking toward the payoff",
        ),
    }
)

OPENING_OVERLAY = "Hook text: {topic}"
CLOSING_OVERLAY = "End card: {brand_keywords} / {goal}"

B_ROLL_CATALOG = (
    CatalogEntry(
        "Over-the-shoulder shot of someone using {topic} on a laptop",
        frozenset({"ai", "tools", "tool", "software", "app", "apps", "tech", "creators", "workflow"}),
    ),
    CatalogEntry(
        "Phone screen recording scrolling through {topic} results",
        frozenset({"youtube", "social", "shorts", "tiktok", "instagram", "app", "creators", "channel"}),
    ),
    CatalogEntry(
        "Analytics dashboard with a climbing subscriber graph",
        frozenset({"grow", "growth", "channel", "subscribers", "views", "marketing", "sales", "fast"}),
    ),
    CatalogEntry(
        "Quick-cut montage of notifications popping on a phone",
        frozenset({"social", "viral", "followers", "engagement"}),
        frozenset({Tone.HIGH_ENERGY, Tone.PLAYFUL}),
    ),
    CatalogEntry(
        "Hands typing fast with a ticking timer overlay",
        frozenset({"productivity", "fast", "time", "busy", "quick"}),
        frozenset({Tone.HIGH_ENERGY}),
    ),
    CatalogEntry(
        "Whiteboard sketch breaking down {topic} step by step",
        frozenset({"learn", "guide", "tips", "how", "steps", "explained"}),
        frozenset({Tone.EDUCATIONAL}),
    ),
    CatalogEntry(
        "Candid reaction shot of {audience} seeing the result",
        frozenset({"community", "audience", "fans", "customers"}),
        frozenset({Tone.INSPIRATIONAL, Tone.PLAYFUL}),
    ),
    CatalogEntry(
        "Sunlit desk setup with coffee and a notebook",
        frozenset({"routine", "morning", "habits", "wellness", "focus"}),
        frozenset({Tone.CALM}),
    ),
    CatalogEntry(
        "Close-up of a checklist being ticked off",
        frozenset({"plan", "checklist", "tips", "steps", "goals"}),
    ),
)

TRANSITION_CATALOG = (
    CatalogEntry("Whip pan on the beat drop", tones=frozenset({Tone.HIGH_ENERGY, Tone.PLAYFUL})),
    CatalogEntry("Jump cut on every sentence", tones=frozenset({Tone.HIGH_ENERGY})),
    CatalogEntry("Speed ramp into the reveal", tones=frozenset({Tone.HIGH_ENERGY, Tone.INSPIRATIONAL})),
    CatalogEntry("Glitch flash between beats", tones=frozenset({Tone.HIGH_ENERGY, Tone.PLAYFUL})),
    CatalogEntry("Match cut on hand movement", keywords=frozenset({"tools", "workflow", "how"})),
    CatalogEntry("Text wipe that reveals the next step", tones=frozenset({Tone.EDUCATIONAL})),
    CatalogEntry("Zoom-through into the screen", keywords=frozenset({"ai", "app", "software", "tech"})),
    CatalogEntry("Light leak fade", tones=frozenset({Tone.INSPIRATIONAL, Tone.CALM})),
    CatalogEntry("Slow cross dissolve", tones=frozenset({Tone.CALM})),
)
