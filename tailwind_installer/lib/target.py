from __future__ import annotations

import logging
import platform
import struct
from typing import Optional, Tuple

from ..errors import InvalidTargetOverride, UnsupportedPlatform

logger = logging.getLogger(__name__)

# Release assets published upstream, plus None meaning "detect from the host".
VALID_TARGETS: Tuple[Optional[str], ...] = (
    "windows-x64.exe",
    "macos-arm64",
    "macos-x64",
    "linux-arm64",
    "linux-x64",
    None,
)

_DARWIN_ARCHES = {"arm", "arm64", "aarch64", "x86_64"}
_X64_ARCHES = {"x86_64", "amd64"}


def host_platform() -> Tuple[str, str, int]:
    """Return ``(os_type, cpu_arch, word_size)`` for the running interpreter."""
    return platform.system(), platform.machine(), struct.calcsize("P") * 8


def resolve_target(
    os_type: str,
    cpu_arch: str,
    word_size: int,
    override: Optional[str] = None,
) -> str:
    """Map a platform tuple (or an explicit override) to a release target.

    Pure function. Apple silicon resolves to the x64 build like Intel macs do.
    """

    if override is not None:
        if override not in VALID_TARGETS:
            raise InvalidTargetOverride(override, VALID_TARGETS)
        return override

    os_name = (os_type or "").lower()
    arch = (cpu_arch or "").lower()

    if word_size == 64:
        if os_name in {"windows", "win32"}:
            return "windows-x64.exe"
        if os_name == "darwin":
            if arch in _DARWIN_ARCHES:
                return "macos-x64"
        elif os_name == "linux" and arch == "aarch64":
            return "linux-arm64"
        elif arch in _X64_ARCHES:
            return "linux-x64"

    raise UnsupportedPlatform(cpu_arch)


def target_for(override: Optional[str] = None) -> str:
    os_type, cpu_arch, word_size = host_platform()
    target = resolve_target(os_type, cpu_arch, word_size, override)
    logger.debug("Target: os=%s arch=%s bits=%s -> %s", os_type, cpu_arch, word_size, target)
    return target
