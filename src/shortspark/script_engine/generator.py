from __future__ import annotations

import logging

from shortspark.brief.model import Brief
from shortspark.config import DEFAULT_CONFIG, EngineConfig
from shortspark.errors import InvalidScheduleError
from shortspark.scheduler.planner import schedule
from shortspark.text_utils import fill, fill_sentence

from .model import NarrativeRole, ScriptBeat, ScriptOutput
from .templates import (
    COLLAPSE_ORDER,
    MIDDLE_ROLES,
    PACING_TEMPLATES,
    ROLE_TEMPLATES,
    VOICEOVER_TEMPLATES,
)

logger = logging.getLogger(__name__)


def assign_roles(beat_count: int) -> list[NarrativeRole]:
    """Map beat positions to narrative roles.

    The hook opens and the call to action closes. Middle roles collapse in
    ``COLLAPSE_ORDER`` when there are too few beats, and spare beats become
    additional value beats.
    """
    if beat_count < 2:
        raise InvalidScheduleError(f"A script needs at least 2 beats, got {beat_count}")

    slots = beat_count - 2
    middle = list(MIDDLE_ROLES)
    for role in COLLAPSE_ORDER:
        if len(middle) <= max(slots, 1):
            break
        middle.remove(role)
    if slots == 0:
        middle = []
    while len(middle) < slots:
        middle.insert(middle.index(NarrativeRole.VALUE) + 1, NarrativeRole.VALUE)
    return [NarrativeRole.HOOK, *middle, NarrativeRole.CTA]


def build_script(brief: Brief, config: EngineConfig = DEFAULT_CONFIG) -> ScriptOutput:
    """Render timed voiceover beats plus delivery and pacing guidance."""
    beat_count = config.script_beat_count(brief.duration)
    beats = schedule(brief.duration, beat_count)
    roles = assign_roles(len(beats))
    slots = brief.slots()

    script_beats = []
    seen: dict[NarrativeRole, int] = {}
    for beat, role in zip(beats, roles):
        occurrence = seen.get(role, 0)
        seen[role] = occurrence + 1
        variants = ROLE_TEMPLATES[role]
        line, delivery, action = variants[occurrence % len(variants)]
        beat_slots = {**slots, "step": occurrence + 1}
        script_beats.append(
            ScriptBeat(
                timestamp=beat.timestamp,
                role=role,
                line=fill_sentence(line, beat_slots),
                delivery=fill(delivery, beat_slots),
                action=fill(action, beat_slots),
            )
        )

    voiceover = fill_sentence(VOICEOVER_TEMPLATES[brief.tone_category], slots)
    pacing = _pacing(brief.duration, len(beats))
    logger.debug("Built script with roles %s", [role.value for role in roles])
    return ScriptOutput(beats=tuple(script_beats), voiceover=voiceover, pacing=pacing)


def _pacing(duration: int, beat_count: int) -> str:
    seconds_per_beat = round(duration / beat_count, 1)
    values = {"duration": duration, "beat_count": beat_count, "seconds_per_beat": f"{seconds_per_beat:g}"}
    for max_duration, template in PACING_TEMPLATES:
        if duration <= max_duration:
            return fill(template, values)
    return fill(PACING_TEMPLATES[-1][1], values)
