from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import load_config
from .errors import TailwindError
from .installer import install
from .lib.env import PATHS
from .lib.target import target_for
from .logging_utils import configure_logging
from .runner import install_and_run, run
from .version import check_version

logger = logging.getLogger(__name__)


def _cmd_install(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    result = install(cfg, if_missing=bool(args.if_missing))
    if not result.skipped:
        logger.info("Install finished: %s", ", ".join(result.ran_steps))
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    check_version(cfg)
    return run(cfg, args.profile, args.args)


def _cmd_install_and_run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    check_version(cfg)
    return install_and_run(cfg, args.profile, args.args)


def _cmd_version(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    result = check_version(cfg)
    target = target_for(cfg.global_.target)
    print(f"configured: {result.configured}")
    print(f"installed:  {result.installed or 'not installed'}")
    print(f"target:     {target}")
    print(f"path:       {cfg.bin_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tailwind-installer")
    p.add_argument("--config", default=PATHS.config_default, help="Path to config (yaml|json)")
    p.add_argument("--log", default=None, help="Also write logs to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("install", help="Download tailwind and scaffold project files")
    sp.add_argument("--if-missing", action="store_true", help="Skip if the executable already exists")
    sp.set_defaults(func=_cmd_install)

    for name, func, help_text in (
        ("run", _cmd_run, "Run an installed tailwind with a profile"),
        ("install-and-run", _cmd_install_and_run, "Install tailwind if needed, then run a profile"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("profile", help="Profile name from the config file")
        sp.add_argument("args", nargs=argparse.REMAINDER, help="Extra args appended to the profile's args")
        sp.set_defaults(func=func)

    sp = sub.add_parser("version", help="Show configured and installed versions")
    sp.set_defaults(func=_cmd_version)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        return int(args.func(args))
    except TailwindError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
