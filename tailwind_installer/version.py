from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .config import TailwindConfig
from .lib.command import run_cmd

logger = logging.getLogger(__name__)

# https://github.com/tailwindlabs/tailwindcss/releases
# Latest known version at the time of publishing.
LATEST_VERSION = "3.0.12"

_VERSION_RE = re.compile(r"tailwindcss v(\S+)")


@dataclass(frozen=True)
class VersionCheck:
    configured: str
    installed: Optional[str]
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


def configured_version(config: TailwindConfig) -> str:
    return config.global_.version or LATEST_VERSION


def parse_version(text: str) -> Optional[str]:
    m = _VERSION_RE.search(text or "")
    return m.group(1) if m else None


def installed_version(config: TailwindConfig) -> Optional[str]:
    """Version reported by the installed executable, or None.

    A missing binary, a failing invocation and unrecognised output all
    collapse to None.
    """

    path = config.bin_path
    if not path.exists():
        return None

    try:
        r = run_cmd([str(path), "--help"])
    except OSError as e:
        logger.debug("Could not run %s: %s", path, e)
        return None

    if r.returncode != 0:
        return None
    return parse_version(r.stdout)


def check_version(config: TailwindConfig) -> VersionCheck:
    """Compare installed vs configured versions.

    Never raises for advisory conditions; resolving the binary path can still
    raise UnsupportedPlatform or InvalidTargetOverride.
    """

    warnings: List[str] = []
    if not config.global_.version:
        warnings.append(
            "tailwind version is not configured. Please set it in your config file:\n\n"
            f'    version: "{LATEST_VERSION}"\n'
        )

    configured = configured_version(config)
    installed = installed_version(config)

    if installed is not None and installed != configured:
        warnings.append(
            f"Outdated tailwind version. Expected {configured}, got {installed}. "
            "Please run `tailwind-installer install` or update the version in your config file."
        )

    for w in warnings:
        logger.warning(w)

    return VersionCheck(configured=configured, installed=installed, warnings=warnings)
