from __future__ import annotations

from ..pipeline import InstallCtx


class PrepareAssetsStep:
    step_id = "20_prepare_assets"

    def run(self, ctx: InstallCtx) -> None:
        ctx.css_dir.mkdir(parents=True, exist_ok=True)
