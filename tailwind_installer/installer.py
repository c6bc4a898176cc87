from __future__ import annotations

import logging

from .config import TailwindConfig
from .pipeline import InstallCtx, PipelineResult, run_pipeline
from .steps import (
    AppCssStep,
    AppJsStep,
    DownloadBinaryStep,
    PrepareAssetsStep,
    TailwindConfigStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        DownloadBinaryStep(),
        PrepareAssetsStep(),
        TailwindConfigStep(),
        AppCssStep(),
        AppJsStep(),
    ]


def install(config: TailwindConfig, *, if_missing: bool = False) -> PipelineResult:
    """Download the configured tailwind release and scaffold the project.

    The binary is always re-downloaded; the scaffolded files are only
    created or patched when they have not been already.
    """

    ctx = InstallCtx(config=config)
    if if_missing and ctx.bin_path.exists():
        logger.info("tailwind already installed at %s", ctx.bin_path)
        return PipelineResult(ran_steps=[], skipped=True)

    return run_pipeline(ctx=ctx, steps=build_steps())
