from __future__ import annotations


class EngineError(ValueError):
    """Base class for generation engine failures."""


class InvalidScheduleError(EngineError):
    """Raised when a beat schedule cannot be built from the requested values."""


class InvalidBriefError(InvalidScheduleError):
    """Raised when a duration that bypassed normalization reaches the scheduler."""
