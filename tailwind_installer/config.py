from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .errors import ConfigError, UnknownProfile
from .lib.env import PATHS
from .lib.target import target_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobalConfig:
    version: Optional[str] = None
    path: Optional[str] = None
    target: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    name: str
    args: List[str] = field(default_factory=list)
    cd: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TailwindConfig:
    """Everything the installer and runner read, built once by the host."""

    global_: GlobalConfig = field(default_factory=GlobalConfig)
    profiles: Mapping[str, Profile] = field(default_factory=dict)
    project_root: str = "."
    build_dir: str = PATHS.build_dir

    def profile(self, name: str) -> Profile:
        try:
            return self.profiles[name]
        except KeyError:
            raise UnknownProfile(name) from None

    def project_path(self, rel: str) -> Path:
        return Path(self.project_root) / rel

    @property
    def bin_path(self) -> Path:
        """Where the executable lives; it may not be installed yet."""
        if self.global_.path:
            return Path(self.global_.path)
        return self.project_path(self.build_dir) / f"tailwind-{target_for(self.global_.target)}"


def _opt_str(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    return str(value)


def _resolve_dir(value: Optional[str], base_dir: Path) -> Optional[str]:
    if value is None:
        return None
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = base_dir / p
    return str(p)


def _load_profile(name: str, raw: Any, base_dir: Path) -> Profile:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"profile {name!r} must be a mapping, got {type(raw).__name__}")

    args = raw.get("args") or []
    if isinstance(args, str) or not isinstance(args, list):
        raise ConfigError(f"profile {name!r}: args must be a list of strings")

    env = raw.get("env") or {}
    if not isinstance(env, dict):
        raise ConfigError(f"profile {name!r}: env must be a mapping")

    return Profile(
        name=name,
        args=[str(a) for a in args],
        cd=_resolve_dir(_opt_str(raw, "cd"), base_dir),
        env={str(k): str(v) for k, v in env.items()},
    )


def config_from_mapping(raw: Mapping[str, Any], base_dir: str | Path = ".") -> TailwindConfig:
    """Build a TailwindConfig from a parsed document.

    Relative ``project_root`` and profile ``cd`` values resolve against ``base_dir``.
    """

    base = Path(base_dir)
    profiles_raw = raw.get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        raise ConfigError("profiles must be a mapping of name -> profile")

    profiles = {str(name): _load_profile(str(name), p, base) for name, p in profiles_raw.items()}

    return TailwindConfig(
        global_=GlobalConfig(
            version=_opt_str(raw, "version"),
            path=_opt_str(raw, "path"),
            target=_opt_str(raw, "target"),
        ),
        profiles=profiles,
        project_root=_resolve_dir(_opt_str(raw, "project_root"), base) or str(base),
        build_dir=_opt_str(raw, "build_dir") or PATHS.build_dir,
    )


def load_config(path: str = PATHS.config_default) -> TailwindConfig:
    p = Path(path)
    base_dir = p.parent
    if not p.exists():
        logger.debug("No config at %s, using defaults", p)
        return config_from_mapping({}, base_dir=os.getcwd())

    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in {p}: {e}") from e
    else:
        try:
            raw = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object, got {type(raw).__name__}")

    return config_from_mapping(raw, base_dir=base_dir)
