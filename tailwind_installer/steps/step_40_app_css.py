from __future__ import annotations

import logging

from ..lib.assets import read_text_or_empty, with_tailwind_imports
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class AppCssStep:
    step_id = "40_app_css"

    def run(self, ctx: InstallCtx) -> None:
        path = ctx.app_css_path
        current = read_text_or_empty(path)
        updated = with_tailwind_imports(current)
        if updated == current:
            logger.info("%s already references tailwind, leaving it alone", path)
            return

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(updated, encoding="utf-8")
        logger.info("Added tailwind imports to %s", path)
