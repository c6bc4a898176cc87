from __future__ import annotations

import logging

from ..lib.env import RELEASE_BASE
from ..lib.net import fetch_body
from ..lib.target import target_for
from ..pipeline import InstallCtx
from ..version import configured_version

logger = logging.getLogger(__name__)


def download_url(version: str, target: str) -> str:
    return f"{RELEASE_BASE}/v{version}/tailwindcss-{target}"


class DownloadBinaryStep:
    step_id = "10_download_binary"

    def run(self, ctx: InstallCtx) -> None:
        version = configured_version(ctx.config)
        target = target_for(ctx.config.global_.target)
        url = download_url(version, target)
        bin_path = ctx.bin_path

        # Nothing is written when the download fails.
        binary = fetch_body(url)

        bin_path.parent.mkdir(parents=True, exist_ok=True)
        bin_path.write_bytes(binary)
        try:
            bin_path.chmod(0o755)
        except OSError as e:
            logger.debug("chmod %s failed: %s", bin_path, e)

        logger.info("Installed tailwind %s (%s) at %s", version, target, bin_path)
