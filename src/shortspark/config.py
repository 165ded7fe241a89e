from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shortspark.brief.model import MAX_DURATION_SEC, MIN_DURATION_SEC
from shortspark.scheduler.planner import beat_count_for

HASHTAG_PATTERN = re.compile(r"^#[0-9a-z]+$")

BeatBuckets = tuple[tuple[int, int], ...]


class EngineConfig(BaseModel):
    """Read-only tables that steer the generators.

    Beat buckets map a maximum duration (inclusive) to a beat count and must be
    sorted by duration with non-decreasing counts.
    """

    model_config = ConfigDict(frozen=True)

    script_beat_buckets: BeatBuckets = ((20, 3), (35, 4), (50, 5), (MAX_DURATION_SEC, 6))
    visual_beat_buckets: BeatBuckets = ((25, 4), (45, 5), (MAX_DURATION_SEC, 6))
    max_beats: int = Field(default=8, ge=2, le=MIN_DURATION_SEC)
    supporting_point_count: int = Field(default=4, ge=3, le=5)
    title_idea_limit: int = Field(default=4, ge=1)
    b_roll_limit: int = Field(default=5, ge=1)
    transition_limit: int = Field(default=4, ge=1)
    hashtag_limit: int = Field(default=8, ge=1)
    niche_hashtags: tuple[str, ...] = Field(
        default=("#shorts", "#youtubeshorts", "#contentcreator"), min_length=1
    )
    default_duration: int = Field(default=30, ge=MIN_DURATION_SEC, le=MAX_DURATION_SEC)

    @field_validator("script_beat_buckets", "visual_beat_buckets")
    @classmethod
    def check_buckets(cls, value: BeatBuckets) -> BeatBuckets:
        if not value:
            raise ValueError("beat buckets cannot be empty")
        previous_duration = 0
        previous_count = 0
        for max_duration, count in value:
            if max_duration <= previous_duration:
                raise ValueError("beat buckets must be sorted by increasing duration")
            if count < 2:
                raise ValueError("every bucket needs room for at least a hook and a call to action")
            if count < previous_count:
                raise ValueError("beat counts must not decrease as duration grows")
            previous_duration, previous_count = max_duration, count
        if previous_duration < MAX_DURATION_SEC:
            raise ValueError(f"beat buckets must cover durations up to {MAX_DURATION_SEC}s")
        return value

    @field_validator("niche_hashtags")
    @classmethod
    def check_hashtags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for tag in value:
            if not HASHTAG_PATTERN.match(tag):
                raise ValueError(f"niche hashtag {tag!r} must be '#' followed by lowercase letters or digits")
        return value

    def script_beat_count(self, duration: int) -> int:
        return min(beat_count_for(duration, self.script_beat_buckets), self.max_beats)

    def visual_beat_count(self, duration: int) -> int:
        return min(beat_count_for(duration, self.visual_beat_buckets), self.max_beats)

    @classmethod
    def from_file(cls, path: Path) -> "EngineConfig":
        text = path.read_text(encoding="utf-8")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            import yaml  # type: ignore[import-not-found]

            payload = yaml.safe_load(text)
        return cls.model_validate(payload or {})


DEFAULT_CONFIG = EngineConfig()
