from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class ShotType(str, Enum):
    CLOSE_UP = "close-up"
    WIDE = "wide"
    OVERLAY_TEXT = "overlay-text"
    B_ROLL_CUT = "b-roll-cut"


class VisualBeat(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    shot_type: ShotType
    description: str
    motion: str
    overlay: str


class VisualPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    beats: Tuple[VisualBeat, ...] = Field(min_length=1)
    b_roll_ideas: Tuple[str, ...] = Field(min_length=1)
    transitions: Tuple[str, ...] = Field(min_length=1)
