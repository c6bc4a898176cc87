from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Sequence

from .config import TailwindConfig
from .lib.env import PATHS

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single install step. Steps run in order; a failure stops the run."""

    step_id: str

    def run(self, ctx: "InstallCtx") -> None:
        ...


@dataclass(frozen=True)
class InstallCtx:
    config: TailwindConfig

    @property
    def bin_path(self) -> Path:
        return self.config.bin_path

    @property
    def css_dir(self) -> Path:
        return self.config.project_path(PATHS.app_css).parent

    @property
    def tailwind_config_path(self) -> Path:
        return self.config.project_path(PATHS.tailwind_config)

    @property
    def app_css_path(self) -> Path:
        return self.config.project_path(PATHS.app_css)

    @property
    def app_js_path(self) -> Path:
        return self.config.project_path(PATHS.app_js)


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    skipped: bool = False


def run_pipeline(*, ctx: InstallCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order.

    Not transactional: state written by earlier steps is kept when a later
    one raises.
    """

    ran: List[str] = []
    for step in steps:
        logger.info("Running step %s", step.step_id)
        step.run(ctx)
        ran.append(step.step_id)
    return PipelineResult(ran_steps=ran)
