"""Unit tests for upstream release HTTP access."""

from __future__ import annotations

from dataclasses import replace

import httpx
import pytest

from core.config import VendoredConfig
from core.errors import ProtocFetchError
from core.platform_targets import LINUX_X86_64
from fetch.release_client import (
    build_archive_url,
    create_http_client,
    download_archive,
    fetch_latest_release_tag,
)


def _config(monkeypatch: pytest.MonkeyPatch) -> VendoredConfig:
    monkeypatch.delenv("PROTOC_VENDORED_DOWNLOAD_URL", raising=False)
    monkeypatch.delenv("PROTOC_VENDORED_RELEASES_URL", raising=False)
    return replace(VendoredConfig.from_env(), github_token=None)


def _client(config: VendoredConfig, handler) -> httpx.Client:
    return create_http_client(config, transport=httpx.MockTransport(handler))


def test_fetch_latest_release_tag_reads_tag_name(monkeypatch) -> None:
    """Latest release discovery should return the JSON tag_name."""
    config = _config(monkeypatch)
    client = _client(config, lambda request: httpx.Response(200, json={"tag_name": "v29.3"}))

    assert fetch_latest_release_tag(client, config) == "v29.3"


def test_fetch_latest_release_tag_rejects_payload_without_tag(monkeypatch) -> None:
    """A release payload lacking tag_name should fail the update."""
    config = _config(monkeypatch)
    client = _client(config, lambda request: httpx.Response(200, json={"name": "x"}))

    with pytest.raises(ProtocFetchError):
        fetch_latest_release_tag(client, config)


def test_fetch_latest_release_tag_rejects_invalid_json(monkeypatch) -> None:
    """Non-JSON release metadata should fail the update."""
    config = _config(monkeypatch)
    client = _client(config, lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(ProtocFetchError):
        fetch_latest_release_tag(client, config)


def test_fetch_latest_release_tag_wraps_http_status(monkeypatch) -> None:
    """Non-2xx responses should surface as fetch errors."""
    config = _config(monkeypatch)
    client = _client(config, lambda request: httpx.Response(403))

    with pytest.raises(ProtocFetchError, match="HTTP 403"):
        fetch_latest_release_tag(client, config)


def test_download_archive_wraps_transport_errors(monkeypatch) -> None:
    """Network failures should surface as fetch errors."""
    config = _config(monkeypatch)

    def _raise(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProtocFetchError):
        download_archive(_client(config, _raise), "https://example.invalid/protoc.zip")


def test_create_http_client_sends_bearer_token(monkeypatch) -> None:
    """A configured GitHub token should be sent as a bearer header."""
    config = replace(_config(monkeypatch), github_token="secret")
    seen: list[str | None] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={"tag_name": "v1.0"})

    fetch_latest_release_tag(_client(config, _handler), config)

    assert seen == ["Bearer secret"]


def test_build_archive_url_uses_bare_version(monkeypatch) -> None:
    """Archive URLs should combine the tag directory and versioned file name."""
    config = _config(monkeypatch)

    url = build_archive_url(config, "v29.3", LINUX_X86_64)

    assert url == (
        "https://github.com/protocolbuffers/protobuf/releases/download/"
        "v29.3/protoc-29.3-linux-x86_64.zip"
    )
