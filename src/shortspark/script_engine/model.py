from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class NarrativeRole(str, Enum):
    HOOK = "hook"
    SETUP = "setup"
    VALUE = "value"
    PROOF = "proof"
    CTA = "call-to-action"


class ScriptBeat(BaseModel):
    """Single voiceover beat pinned to the runtime."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    role: NarrativeRole = Field(description="Narrative purpose of the beat")
    line: str = Field(description="Spoken text")
    delivery: str = Field(description="Pacing or emphasis cue for the narrator")
    action: str = Field(description="On-screen direction")


class ScriptOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    beats: Tuple[ScriptBeat, ...] = Field(min_length=2)
    voiceover: str
    pacing: str
