from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TAILWIND_MARKER = "tailwind"

TAILWIND_CONFIG_TEMPLATE = """\
// See the Tailwind configuration guide for advanced usage
// https://tailwindcss.com/docs/configuration
module.exports = {
  content: [
    './js/**/*.js',
    '../lib/*_web.ex',
    '../lib/*_web/**/*.*ex'
  ],
  theme: {
    extend: {},
  },
  plugins: [
    require('@tailwindcss/forms')
  ]
}
"""

CSS_IMPORTS = """\
@import "tailwindcss/base";
@import "tailwindcss/components";
@import "tailwindcss/utilities";
"""

LEGACY_CSS_IMPORT = '@import "./phoenix.css";\n'
JS_CSS_IMPORT = 'import "../css/app.css"\n'


def read_text_or_empty(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def write_if_missing(path: Path, content: str) -> bool:
    """Write ``content`` only when nothing exists at ``path``. Returns True if written."""

    if path.exists():
        logger.info("Keeping existing %s", path)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", path)
    return True


def with_tailwind_imports(css: str) -> str:
    """Prefix the tailwind imports unless the marker already appears.

    The check is a plain substring search, so a comment mentioning
    "tailwind" counts as already configured.
    """

    if TAILWIND_MARKER in css:
        return css
    return f"{CSS_IMPORTS}\n{css.replace(LEGACY_CSS_IMPORT, '')}\n"


def without_line(text: str, line: str) -> str:
    return text.replace(line, "")
