from __future__ import annotations

from ..lib.assets import TAILWIND_CONFIG_TEMPLATE, write_if_missing
from ..pipeline import InstallCtx


class TailwindConfigStep:
    step_id = "30_tailwind_config"

    def run(self, ctx: InstallCtx) -> None:
        # Existence is the only guard: a hand-edited config is never replaced.
        write_if_missing(ctx.tailwind_config_path, TAILWIND_CONFIG_TEMPLATE)
