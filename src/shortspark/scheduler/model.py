from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Beat(BaseModel):
    """Timestamped slice of the total runtime."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    timestamp: str = Field(description="Start of the beat rendered as MM:SS")
    start_seconds: int = Field(ge=0)
    end_seconds: int = Field(gt=0)

    @property
    def length_seconds(self) -> int:
        return self.end_seconds - self.start_seconds
