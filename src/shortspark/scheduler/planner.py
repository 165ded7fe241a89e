from __future__ import annotations

import logging
import math
from typing import Sequence

from shortspark.errors import InvalidBriefError, InvalidScheduleError

from .model import Beat

logger = logging.getLogger(__name__)


def format_timestamp(seconds: int) -> str:
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def schedule(duration: int, beat_count: int) -> tuple[Beat, ...]:
    """Split ``[0, duration)`` into ``beat_count`` contiguous beats.

    Earlier beats absorb the remainder, so every beat is either
    ``duration // beat_count`` or one second longer and the last beat always
    ends exactly at ``duration``.
    """
    seconds = _validate_duration(duration)
    if isinstance(beat_count, bool) or not isinstance(beat_count, int) or beat_count <= 0:
        raise InvalidScheduleError(f"beat_count must be a positive integer, got {beat_count!r}")
    if beat_count > seconds:
        raise InvalidScheduleError(
            f"Cannot split {seconds}s into {beat_count} beats of at least one second"
        )

    base, remainder = divmod(seconds, beat_count)
    beats: list[Beat] = []
    start = 0
    for index in range(beat_count):
        length = base + 1 if index < remainder else base
        end = start + length
        beats.append(
            Beat(
                index=index,
                timestamp=format_timestamp(start),
                start_seconds=start,
                end_seconds=end,
            )
        )
        start = end
    logger.debug("Scheduled %s beats across %ss", beat_count, seconds)
    return tuple(beats)


def beat_count_for(duration: int, buckets: Sequence[tuple[int, int]]) -> int:
    """Look up the beat count for ``duration`` in a ``(max_duration, count)`` table."""
    for max_duration, count in buckets:
        if duration <= max_duration:
            return count
    return buckets[-1][1]


def _validate_duration(duration: object) -> int:
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise InvalidBriefError(f"duration must be a number of seconds, got {duration!r}")
    if isinstance(duration, float):
        if not math.isfinite(duration) or not duration.is_integer():
            raise InvalidBriefError(f"duration must be a finite whole number, got {duration!r}")
        duration = int(duration)
    if duration <= 0:
        raise InvalidBriefError(f"duration must be positive, got {duration}")
    return duration
