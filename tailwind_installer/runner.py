from __future__ import annotations

import logging
import os
from typing import Optional, Sequence, TextIO

from .config import TailwindConfig
from .errors import ExecutableNotFound
from .installer import install
from .lib.command import stream_cmd

logger = logging.getLogger(__name__)


def run(
    config: TailwindConfig,
    profile: str,
    extra_args: Sequence[str] = (),
    *,
    out: Optional[TextIO] = None,
) -> int:
    """Run tailwind with the profile's args followed by ``extra_args``.

    Output is streamed as it is produced. Returns the exit status; a
    non-zero status is not an error here.
    """

    p = config.profile(profile)
    bin_path = config.bin_path
    if not bin_path.exists():
        raise ExecutableNotFound(str(bin_path))

    argv = [str(bin_path), *p.args, *extra_args]

    return stream_cmd(
        argv,
        cwd=p.cd or os.getcwd(),
        env=p.env,
        out=out,
    )


def install_and_run(
    config: TailwindConfig,
    profile: str,
    extra_args: Sequence[str] = (),
    *,
    out: Optional[TextIO] = None,
) -> int:
    """Install tailwind if it is not available, then run it."""

    if not config.bin_path.exists():
        install(config)

    return run(config, profile, extra_args, out=out)
