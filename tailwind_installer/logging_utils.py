from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .lib.env import PATHS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def _file_handler(log_path: str) -> logging.FileHandler:
    """Open ``log_path``, or ``./tailwind-installer.log`` if it cannot be created."""
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path)
    except OSError:
        return logging.FileHandler(Path.cwd() / PATHS.log_fallback)


def configure_logging(log_path: Optional[str] = None, level: int = logging.INFO) -> Optional[str]:
    """Install stderr (and optional file) handlers on the root logger once.

    stdout is left to the tailwind child process. Returns the log file in
    use, if any.
    """

    root = logging.getLogger()
    root.setLevel(level)
    if getattr(root, "_tailwind_configured", False):
        return getattr(root, "_tailwind_log_path", None)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream=sys.stderr)]

    chosen_path: Optional[str] = None
    if log_path:
        fh = _file_handler(log_path)
        chosen_path = fh.baseFilename
        handlers.append(fh)

    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)

    root._tailwind_configured = True  # type: ignore[attr-defined]
    root._tailwind_log_path = chosen_path  # type: ignore[attr-defined]

    logging.getLogger(__name__).debug("Logging initialized (requested=%s, actual=%s)", log_path, chosen_path)
    return chosen_path
