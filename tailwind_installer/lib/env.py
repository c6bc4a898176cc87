from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    config_default: str = "tailwind.yaml"
    build_dir: str = "_build"
    tailwind_config: str = "assets/tailwind.config.js"
    app_css: str = "assets/css/app.css"
    app_js: str = "assets/js/app.js"
    log_fallback: str = "tailwind-installer.log"


PATHS = Paths()

RELEASE_BASE = "https://github.com/tailwindlabs/tailwindcss/releases/download"
