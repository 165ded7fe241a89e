from __future__ import annotations

from types import MappingProxyType

from shortspark.brief.tone import Tone

from .model import NarrativeRole

ROLE_TEMPLATES = MappingProxyType(
    {
        NarrativeRole.HOOK: (
            (
                "Calling all {audience}: {topic} is about to change how you {goal}.",
                "Punchy and front-loaded; hit the first three words hard.",
                "Face-cam close-up with a snap zoom on the first word.",
            ),
        ),
        NarrativeRole.SETUP: (
            (
                "Here's the problem: most people treat {topic} like a chore, so they never {goal}.",
                "Conversational; pause for a beat before naming the problem.",
                "Cut to a screen recording that frames the problem.",
            ),
        ),
        NarrativeRole.VALUE: (
            (
                "Move {step}: pick one {topic} workflow and run it every day this week.",
                "Speed up slightly and count the step out loud.",
                "Overlay the step number and a quick demo of the workflow.",
            ),
            (
                "Move {step}: let {topic} handle the busywork so you can focus on what {audience} actually watch.",
                "Lean in; stress the word 'focus'.",
                "Split screen showing the manual way next to the {topic} way.",
            ),
            (
                "Move {step}: batch your {topic} sessions and reuse every output twice.",
                "Quick and confident; land the word 'twice'.",
                "Rapid montage of batched clips stacking up on a timeline.",
            ),
        ),
        NarrativeRole.PROOF: (
            (
                "{brand_keywords} runs this exact {topic} system with {audience} every week.",
                "Slow down and let the proof land.",
                "Results screenshot with a {brand_keywords} lower-third.",
            ),
        ),
        NarrativeRole.CTA: (
            (
                "Follow {brand_keywords} and start using {topic} today to {goal}.",
                "Warm and direct; smile on the last word.",
                "Point to the follow button while the end card reads '{goal}'.",
            ),
        ),
    }
)

MIDDLE_ROLES = (NarrativeRole.SETUP, NarrativeRole.VALUE, NarrativeRole.PROOF)

# Middle roles folded away first when the schedule is short on beats.
COLLAPSE_ORDER = (NarrativeRole.PROOF, NarrativeRole.SETUP)

VOICEOVER_TEMPLATES = MappingProxyType(
    {
        Tone.HIGH_ENERGY: (
            "Deliver with {tone} momentum: bright pitch, clipped sentences and a smile you can hear. "
            "Talk to {audience} like a friend who just found a shortcut, and never let a pause run past half a second."
        ),
        Tone.EDUCATIONAL: (
            "Read it like a teacher who sounds {tone}: clear diction, one idea per sentence and a short pause after each key term "
            "so {audience} can follow every step."
        ),
        Tone.INSPIRATIONAL: (
            "Build an arc that feels {tone}: start grounded and quiet, then lift the energy as the payoff approaches. "
            "Speak to {audience} as the person they are about to become."
        ),
        Tone.PLAYFUL: (
            "Lean into a {tone} delivery: exaggerated emphasis, a wink in the voice and room for one beat of comic timing. "
            "Keep it light so {audience} feel in on the joke."
        ),
        Tone.CALM: (
            "Stay {tone} and unhurried: low pitch, even pace and soft consonants. "
            "Give {audience} room to breathe between lines."
        ),
        Tone.NEUTRAL: (
            "Aim for a natural read that feels {tone}: steady pace, confident emphasis on the topic and a friendly close "
            "aimed squarely at {audience}."
        ),
    }
)

# (max duration in seconds, pacing template); first match wins.
PACING_TEMPLATES = (
    (
        20,
        "At {duration} seconds every word has to earn its place: {beat_count} beats of about {seconds_per_beat} "
        "seconds each, hard cuts on every line and no intro card.",
    ),
    (
        40,
        "A {duration}-second runtime gives {beat_count} beats of roughly {seconds_per_beat} seconds. "
        "Cut every two to three seconds, hold the value beats slightly longer and keep the call to action under five seconds.",
    ),
    (
        60,
        "Use the full {duration} seconds for {beat_count} beats of about {seconds_per_beat} seconds. "
        "Reset attention every three seconds with a cut, zoom or overlay and plant a pattern break right before the call to action.",
    ),
)
