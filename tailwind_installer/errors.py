from __future__ import annotations

from typing import Optional, Sequence


class TailwindError(RuntimeError):
    """Base class for fatal installer/runner conditions.

    Each subclass carries a stable ``kind`` so callers can branch on the
    failure without matching message text.
    """

    kind = "tailwind_error"


class UnsupportedPlatform(TailwindError):
    kind = "unsupported_platform"

    def __init__(self, arch: str) -> None:
        self.arch = arch
        super().__init__(f"tailwind is not available for architecture: {arch}")


class InvalidTargetOverride(TailwindError):
    kind = "invalid_target_override"

    def __init__(self, target: str, accepted: Sequence[Optional[str]]) -> None:
        self.target = target
        self.accepted = list(accepted)
        shown = ", ".join("null" if t is None else t for t in self.accepted)
        super().__init__(
            f"{target} not in the list of accepted platform targets, "
            f"if you are going to specify a target, use {shown}"
        )


class UnknownProfile(TailwindError):
    kind = "unknown_profile"

    def __init__(self, profile: str) -> None:
        self.profile = profile
        super().__init__(
            f"unknown tailwind profile {profile!r}. Make sure the profile is defined "
            f"in your tailwind.yaml file, such as:\n\n"
            f"    version: \"3.0.12\"\n"
            f"    profiles:\n"
            f"      {profile}:\n"
            f"        args:\n"
            f"          - --config=tailwind.config.js\n"
            f"          - --input=css/app.css\n"
            f"          - --output=../priv/static/assets/app.css\n"
            f"        cd: assets\n"
        )


class FetchFailed(TailwindError):
    kind = "fetch_failed"

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"couldn't fetch {url}: {detail}")


class ConfigError(TailwindError, ValueError):
    kind = "config_error"


class ExecutableNotFound(TailwindError):
    kind = "executable_not_found"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"tailwind executable not found at {path}. Run `tailwind-installer install` "
            "first, or use `tailwind-installer install-and-run`."
        )
