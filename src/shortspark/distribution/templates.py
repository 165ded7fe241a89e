from __future__ import annotations

from types import MappingProxyType

from shortspark.brief.tone import Tone

CAPTION_OPENERS = MappingProxyType(
    {
        Tone.HIGH_ENERGY: "This changes everything.",
        Tone.EDUCATIONAL: "Save this for later.",
        Tone.INSPIRATIONAL: "Your next chapter starts here.",
        Tone.PLAYFUL: "Okay, this one is almost unfair.",
        Tone.CALM: "One small shift, zero stress.",
        Tone.NEUTRAL: "Worth a minute of your time.",
    }
)

CAPTION_TEMPLATE = (
    "{opener} {topic} for {audience}: here's how to {goal}. "
    "Follow {brand_keywords} for the next drop and tell us your take below."
)

POSTING_CHECKLIST = (
    "Export in 9:16 at 1080x1920 and keep the runtime at {duration} seconds.",
    "Put the hook on screen in the first two seconds and burn in captions.",
    "Add {brand_keywords} to the title, description and pinned comment.",
    "Pin a comment that asks viewers how they use {topic}.",
    "Post at your audience's peak hour and reply to the first comments within 30 minutes.",
    "Track saves, shares and retention for 48 hours to confirm the video helps viewers {goal}.",
    "Cross-post to TikTok and Instagram Reels with platform-native captions.",
)

THUMBNAIL_STYLES = MappingProxyType(
    {
        Tone.HIGH_ENERGY: "Saturated colors, motion streaks and a wide-eyed reaction",
        Tone.EDUCATIONAL: "Clean background, an arrow pointing at the key visual and a numbered label",
        Tone.INSPIRATIONAL: "Warm golden light and an upward-looking portrait",
        Tone.PLAYFUL: "Exaggerated expression, sticker-style doodles and a bright pop color",
        Tone.CALM: "Soft pastel palette, lots of negative space and a relaxed pose",
        Tone.NEUTRAL: "High-contrast background and a confident expression",
    }
)

THUMBNAIL_TEMPLATE = "{style}, with three bold words about {topic} and a color grade that reads as {tone}."

HASHTAG_STOPWORDS = frozenset(
    {"a", "an", "and", "for", "from", "how", "in", "of", "on", "or", "the", "to", "with", "your", "you"}
)
