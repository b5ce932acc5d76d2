"""Runtime configuration model for protoc-vendored.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DOWNLOAD_BASE_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_RELEASES_API_URL,
    DEFAULT_STORE_ROOT,
)
from core.errors import ProtocConfigError


@dataclass(frozen=True)
class VendoredConfig:
    """Validated runtime configuration.

    Attributes:
        store_root: Root directory of the vendored asset store.
        releases_api_url: Endpoint returning the latest upstream release.
        download_base_url: Base URL that release archives are served from.
        http_timeout_seconds: Timeout applied to every HTTP request.
        github_token: Optional bearer token for the releases API.
    """

    store_root: Path
    releases_api_url: str
    download_base_url: str
    http_timeout_seconds: float
    github_token: str | None

    @classmethod
    def from_env(cls) -> "VendoredConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ProtocConfigError: If environment values are invalid.
        """
        releases_api_url = os.getenv("PROTOC_VENDORED_RELEASES_URL", DEFAULT_RELEASES_API_URL)
        download_base_url = os.getenv("PROTOC_VENDORED_DOWNLOAD_URL", DEFAULT_DOWNLOAD_BASE_URL)
        timeout_value = os.getenv("PROTOC_VENDORED_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        github_token = os.getenv("GITHUB_TOKEN") or None
        return cls(
            store_root=resolve_store_root(),
            releases_api_url=releases_api_url,
            download_base_url=download_base_url.rstrip("/"),
            http_timeout_seconds=_parse_http_timeout(timeout_value),
            github_token=github_token,
        )


def resolve_store_root() -> Path:
    """Read only the store root from the environment.

    Runtime lookups use this instead of ``VendoredConfig.from_env`` so that
    update-only settings never affect path resolution.
    """
    store_root_value = os.getenv("PROTOC_VENDORED_ROOT", str(DEFAULT_STORE_ROOT))
    return Path(store_root_value).expanduser().resolve()


def _parse_http_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        ProtocConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise ProtocConfigError(
            "Invalid PROTOC_VENDORED_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set PROTOC_VENDORED_HTTP_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise ProtocConfigError(
            "Invalid PROTOC_VENDORED_HTTP_TIMEOUT value: "
            f"expected a positive number, got '{raw_value}'."
        )
    return timeout
