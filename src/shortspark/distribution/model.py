from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DistributionPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    caption: str
    hashtags: Tuple[str, ...] = Field(min_length=1)
    posting_checklist: Tuple[str, ...] = Field(min_length=1)
    thumbnail_concept: str

    @field_validator("hashtags")
    @classmethod
    def check_hashtags(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for tag in value:
            if not tag.startswith("#") or len(tag) < 2 or any(ch.isspace() for ch in tag):
                raise ValueError(f"Malformed hashtag: {tag!r}")
        return value
