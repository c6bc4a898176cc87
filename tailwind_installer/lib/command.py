from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def _merged_env(env: Mapping[str, str] | None) -> dict[str, str]:
    return dict(os.environ, **(env or {}))


def run_cmd(
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> CmdResult:
    """Run a command to completion with stderr folded into stdout.

    Used for short checks (``--help``); the caller decides what a non-zero
    exit means.
    """

    argv_list = list(argv)
    logger.debug("CMD %s", _fmt_argv(argv_list))

    p = subprocess.run(
        argv_list,
        text=True,
        errors="replace",
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        cwd=cwd,
        env=_merged_env(env),
    )

    if p.stdout:
        logger.debug("OUTPUT %s", p.stdout.strip())

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout)


def stream_cmd(
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    out: Optional[TextIO] = None,
) -> int:
    """Run a command, copying its combined output line by line as it arrives.

    Blocks until the child exits and returns its exit status.
    """

    argv_list = list(argv)
    sink = out if out is not None else sys.stdout
    logger.info("CMD %s", _fmt_argv(argv_list))

    with subprocess.Popen(
        argv_list,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        stdin=None,
        cwd=cwd,
        env=_merged_env(env),
        text=True,
        errors="replace",
        bufsize=1,
    ) as p:
        assert p.stdout is not None
        for line in p.stdout:
            sink.write(line)
            sink.flush()
        returncode = p.wait()

    if returncode != 0:
        logger.debug("Exit status %s: %s", returncode, _fmt_argv(argv_list))
    return returncode
