from __future__ import annotations

from types import MappingProxyType

from shortspark.brief.tone import Tone

HOOK_TEMPLATES = MappingProxyType(
    {
        Tone.HIGH_ENERGY: "Stop scrolling: {topic} is the shortcut {audience} keep missing when they try to {goal}.",
        Tone.EDUCATIONAL: "Here is what nobody explains about {topic}, and how {audience} can use it to {goal}.",
        Tone.INSPIRATIONAL: "If you are one of the {audience}, this is your sign: {topic} can help you {goal}.",
        Tone.PLAYFUL: "Plot twist: {topic} is the cheat code {audience} need to {goal}.",
        Tone.CALM: "Take a breath. Let's walk through {topic} so {audience} can {goal} without the stress.",
        Tone.NEUTRAL: "{topic}: the simple approach {audience} can use to {goal}.",
    }
)

CONCEPT_TEMPLATE = (
    "A {duration}-second {tone} short that shows {audience} how {topic} helps them {goal}. "
    "Open on the pain point, deliver two fast wins, and close with {brand_keywords} as the "
    "guide who makes it repeatable."
)

# Rhetorical angles, in the order they are offered.
SUPPORTING_ANGLES = (
    ("problem", "Name the pain: most {audience} stall on {topic} because nobody shows the first step."),
    ("quick_win", "Quick win: one {topic} move {audience} can try in under a minute."),
    ("social_proof", "Social proof: how {brand_keywords} uses {topic} to {goal}."),
    ("curiosity", "Open loop: tease the one {topic} mistake that quietly stops people who want to {goal}."),
    ("payoff", "Payoff: the before-and-after that proves {topic} helps you {goal}."),
)

PAD_POINTS = (
    "Recap the single takeaway in one sentence before the call to action.",
    "Answer the most common objection in five seconds or less.",
    "Show the result on screen before explaining how it works.",
)

TITLE_TEMPLATES = (
    "{subject} in {duration} Seconds",
    "The {subject} Playbook",
    "Stop Guessing: {subject}",
    "{subject}, Explained Fast",
)

TITLE_SUBJECT_FIELDS = ("topic", "goal", "brand_keywords")
