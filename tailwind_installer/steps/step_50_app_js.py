from __future__ import annotations

import logging

from ..lib.assets import JS_CSS_IMPORT, without_line
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class AppJsStep:
    step_id = "50_app_js"

    def run(self, ctx: InstallCtx) -> None:
        path = ctx.app_js_path
        try:
            current = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return

        updated = without_line(current, JS_CSS_IMPORT)
        if updated != current:
            path.write_text(updated, encoding="utf-8")
            logger.info("Removed CSS import from %s", path)
