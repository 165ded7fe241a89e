from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class IdeaOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    hook: str
    concept: str
    supporting_points: Tuple[str, ...] = Field(min_length=3, max_length=5)
    title_ideas: Tuple[str, ...] = Field(min_length=1)
