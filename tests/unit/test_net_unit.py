from __future__ import annotations

import socket
import ssl
import threading

import httpx
import pytest

from tailwind_installer.errors import FetchFailed
from tailwind_installer.lib import net as mod

URL = "https://github.com/tailwindlabs/tailwindcss/releases/download/v3.0.12/tailwindcss-linux-x64"


def test_proxy_settings_empty_env():
    assert mod.proxy_settings({}) == {}


def test_https_proxy_host_and_port():
    out = mod.proxy_settings({"HTTPS_PROXY": "http://proxy.local:8080"})
    assert out == {"https://": ("proxy.local", 8080)}


def test_uppercase_wins_over_lowercase():
    out = mod.proxy_settings(
        {
            "HTTP_PROXY": "http://upper:3128",
            "http_proxy": "http://lower:3129",
            "https_proxy": "http://only-lower:8443",
        }
    )
    assert out == {"http://": ("upper", 3128), "https://": ("only-lower", 8443)}


def test_proxy_default_ports():
    out = mod.proxy_settings({"HTTP_PROXY": "http://p1", "HTTPS_PROXY": "https://p2"})
    assert out == {"http://": ("p1", 80), "https://": ("p2", 443)}


def test_proxy_without_scheme():
    assert mod.proxy_settings({"http_proxy": "corp-proxy:3128"}) == {"http://": ("corp-proxy", 3128)}


def test_ssl_context_verifies_peer_and_hostname():
    ctx = mod.ssl_context()
    assert ctx.verify_mode == ssl.CERT_REQUIRED
    assert ctx.check_hostname is True


def test_fetch_body_200_returns_bytes():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, content=b"\x7fELF binary")

    body = mod.fetch_body(URL, environ={}, transport=httpx.MockTransport(handler))
    assert body == b"\x7fELF binary"
    assert seen == [URL]


def test_fetch_body_follows_redirect():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "github.com":
            return httpx.Response(302, headers={"Location": "https://objects.example.com/blob"})
        return httpx.Response(200, content=b"blob")

    assert mod.fetch_body(URL, environ={}, transport=httpx.MockTransport(handler)) == b"blob"


@pytest.mark.parametrize("status", [201, 204, 404, 500])
def test_fetch_body_non_200_raises(status):
    transport = httpx.MockTransport(lambda request: httpx.Response(status, content=b"nope"))
    with pytest.raises(FetchFailed) as e:
        mod.fetch_body(URL, environ={}, transport=transport)
    assert e.value.url == URL
    assert str(status) in e.value.detail
    assert e.value.kind == "fetch_failed"


def test_fetch_body_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchFailed) as e:
        mod.fetch_body(URL, environ={}, transport=httpx.MockTransport(handler))
    assert "connection refused" in e.value.detail


class _FakeTransport:
    def __init__(self, *, verify=None, proxy=None):
        self.verify = verify
        self.proxy = proxy


class _FakeClient:
    last = None

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        _FakeClient.last = self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def get(self, url):
        return httpx.Response(200, content=b"ok", request=httpx.Request("GET", url))


def test_https_proxy_env_mounts_proxy_transport(monkeypatch):
    monkeypatch.setattr(mod.httpx, "HTTPTransport", _FakeTransport)
    monkeypatch.setattr(mod.httpx, "Client", _FakeClient)

    assert mod.fetch_body(URL, environ={"HTTPS_PROXY": "http://proxy.local:8080"}) == b"ok"

    kwargs = _FakeClient.last.kwargs
    assert kwargs["trust_env"] is False
    assert kwargs["follow_redirects"] is True
    assert isinstance(kwargs["verify"], ssl.SSLContext)
    mounts = kwargs["mounts"]
    assert list(mounts) == ["https://"]
    assert mounts["https://"].proxy == "http://proxy.local:8080"
    assert mounts["https://"].verify is kwargs["verify"]


def test_no_proxy_env_no_mounts(monkeypatch):
    monkeypatch.setattr(mod.httpx, "Client", _FakeClient)
    mod.fetch_body(URL, environ={})
    assert _FakeClient.last.kwargs["mounts"] is None


@pytest.mark.parametrize("value", ["http://proxy:notaport", "http://:8080"])
def test_malformed_proxy_raises_fetch_failed(value):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(FetchFailed) as e:
        mod.fetch_body(URL, environ={"HTTPS_PROXY": value}, transport=httpx.MockTransport(handler))
    assert "invalid proxy setting" in e.value.detail


def test_https_request_tunnels_through_proxy():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(10)
    port = listener.getsockname()[1]
    received = []

    def serve():
        try:
            conn, _ = listener.accept()
        except OSError:
            return
        with conn:
            conn.settimeout(10)
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                data += chunk
            received.append(data.decode("latin-1"))
            conn.sendall(b"HTTP/1.1 403 Forbidden\r\nContent-Length: 0\r\n\r\n")

    server = threading.Thread(target=serve, daemon=True)
    server.start()
    try:
        with pytest.raises(FetchFailed):
            mod.fetch_body(URL, environ={"HTTPS_PROXY": f"http://127.0.0.1:{port}"})
    finally:
        server.join(timeout=10)
        listener.close()

    assert received, "proxy saw no connection"
    assert received[0].startswith("CONNECT github.com:443 ")
