from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from shortspark.brief.model import Brief
from shortspark.config import DEFAULT_CONFIG, EngineConfig
from shortspark.distribution.generator import build_distribution_plan
from shortspark.distribution.model import DistributionPlan
from shortspark.ideation.generator import build_idea
from shortspark.ideation.model import IdeaOutput
from shortspark.script_engine.generator import build_script
from shortspark.script_engine.model import ScriptOutput
from shortspark.visuals.generator import build_visual_plan
from shortspark.visuals.model import VisualPlan

logger = logging.getLogger(__name__)


class AgentBundle(BaseModel):
    """Everything produced for one brief in a single generation pass."""

    model_config = ConfigDict(frozen=True)

    brief: Brief
    idea: IdeaOutput
    script: ScriptOutput
    visuals: VisualPlan
    distribution: DistributionPlan


@dataclass(frozen=True)
class StudioOrchestrator:
    config: EngineConfig

    @classmethod
    def from_file(cls, path: Path) -> "StudioOrchestrator":
        return cls.default(EngineConfig.from_file(path))

    @classmethod
    def default(cls, config: EngineConfig | None = None) -> "StudioOrchestrator":
        return cls(config=config or DEFAULT_CONFIG)

    def run_payload(self, payload: Mapping[str, Any]) -> AgentBundle:
        brief = Brief.from_payload(payload, default_duration=self.config.default_duration)
        return self.run(brief)

    def run(self, brief: Brief) -> AgentBundle:
        logger.info("Generating bundle for topic %r (%ss)", brief.topic, brief.duration)
        bundle = AgentBundle(
            brief=brief,
            idea=build_idea(brief, self.config),
            script=build_script(brief, self.config),
            visuals=build_visual_plan(brief, self.config),
            distribution=build_distribution_plan(brief, self.config),
        )
        logger.info(
            "Bundle ready: %s script beats, %s visual beats, %s hashtags",
            len(bundle.script.beats),
            len(bundle.visuals.beats),
            len(bundle.distribution.hashtags),
        )
        return bundle
