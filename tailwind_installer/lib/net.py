from __future__ import annotations

import logging
import os
import ssl
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

import certifi
import httpx

from ..errors import FetchFailed

logger = logging.getLogger(__name__)

# scheme mounted -> env vars checked, in precedence order
_PROXY_ENV = {
    "http://": ("HTTP_PROXY", "http_proxy"),
    "https://": ("HTTPS_PROXY", "https_proxy"),
}

_DEFAULT_PORTS = {"http": 80, "https": 443}


def ssl_context() -> ssl.SSLContext:
    """Peer + hostname verification against certifi's bundled CA store."""
    ctx = ssl.create_default_context(cafile=certifi.where())
    ctx.verify_mode = ssl.CERT_REQUIRED
    ctx.check_hostname = True
    return ctx


def _parse_proxy(value: str) -> Tuple[str, int]:
    u = urlparse(value if "://" in value else f"http://{value}")
    if not u.hostname:
        raise ValueError(f"Proxy URL has no host: {value}")
    port = u.port or _DEFAULT_PORTS.get(u.scheme, 80)
    return u.hostname, port


def proxy_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Tuple[str, int]]:
    """Return ``{"http://": (host, port), "https://": (host, port)}`` from the environment."""

    env = os.environ if environ is None else environ
    out: Dict[str, Tuple[str, int]] = {}
    for scheme, names in _PROXY_ENV.items():
        for name in names:
            value = env.get(name)
            if value:
                logger.debug("Using %s: %s", name, value)
                out[scheme] = _parse_proxy(value)
                break
    return out


def _client(
    environ: Optional[Mapping[str, str]],
    transport: Optional[httpx.BaseTransport],
) -> httpx.Client:
    ctx = ssl_context()
    mounts = {
        scheme: httpx.HTTPTransport(verify=ctx, proxy=f"http://{host}:{port}")
        for scheme, (host, port) in proxy_settings(environ).items()
    }
    return httpx.Client(
        verify=ctx,
        mounts=mounts or None,
        transport=transport,
        trust_env=False,
        follow_redirects=True,
        timeout=None,
    )


def fetch_body(
    url: str,
    *,
    environ: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> bytes:
    """Single blocking GET. Anything but a 200 raises FetchFailed."""

    logger.debug("Downloading tailwind from %s", url)
    try:
        client = _client(environ, transport)
    except ValueError as e:
        raise FetchFailed(url, f"invalid proxy setting: {e}") from e

    with client:
        try:
            resp = client.get(url)
        except httpx.HTTPError as e:
            raise FetchFailed(url, repr(e)) from e

    if resp.status_code != 200:
        raise FetchFailed(url, f"HTTP {resp.status_code} {resp.reason_phrase}".rstrip())

    logger.debug("Downloaded %d bytes", len(resp.content))
    return resp.content
