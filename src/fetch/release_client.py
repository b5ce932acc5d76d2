"""HTTP access to upstream protobuf releases.

This module encapsulates httpx client creation, latest-release
discovery, and release archive downloads.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import VendoredConfig
from core.errors import ProtocFetchError
from core.types import SupportedTarget


def create_http_client(
    config: VendoredConfig,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the HTTP client used for one update run.

    Args:
        config: Runtime config with timeout and optional token.
        transport: Optional transport override, used by tests.

    Returns:
        Configured httpx client that follows redirects.
    """
    headers = {"User-Agent": "protoc-vendored"}
    if config.github_token:
        headers["Authorization"] = f"Bearer {config.github_token}"
    return httpx.Client(
        follow_redirects=True,
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def fetch_latest_release_tag(client: httpx.Client, config: VendoredConfig) -> str:
    """Read the latest upstream release tag.

    Args:
        client: HTTP client.
        config: Runtime config holding the releases API URL.

    Returns:
        Release tag such as ``v29.3``.

    Raises:
        ProtocFetchError: If the request fails or the payload lacks a tag.
    """
    response = _get(client, config.releases_api_url)
    try:
        payload: Any = response.json()
    except ValueError as error:
        raise ProtocFetchError(
            f"Release metadata from {config.releases_api_url} is not valid JSON."
        ) from error
    tag_name = payload.get("tag_name") if isinstance(payload, dict) else None
    if not isinstance(tag_name, str) or not tag_name.strip():
        raise ProtocFetchError(
            f"Release metadata from {config.releases_api_url} has no tag_name field."
        )
    return tag_name.strip()


def build_archive_url(config: VendoredConfig, release_tag: str, target: SupportedTarget) -> str:
    """Build the download URL of one target's release archive."""
    return f"{config.download_base_url}/{release_tag}/{target.archive_name(release_tag)}"


def download_archive(client: httpx.Client, url: str) -> bytes:
    """Download one release archive into memory.

    Raises:
        ProtocFetchError: If the request fails.
    """
    return _get(client, url).content


def _get(client: httpx.Client, url: str) -> httpx.Response:
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as error:
        raise ProtocFetchError(
            f"Request to {url} failed with HTTP {error.response.status_code}. "
            "Check the release tag and re-run the update."
        ) from error
    except httpx.HTTPError as error:
        raise ProtocFetchError(
            f"Request to {url} failed: {error}. Check network access and re-run the update."
        ) from error
    return response
