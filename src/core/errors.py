"""protoc-vendored exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Resolver failures and maintenance failures use distinct types.
"""

from __future__ import annotations

from pathlib import Path


class ProtocVendoredError(Exception):
    """Base exception for all protoc-vendored failures."""


class UnsupportedPlatformError(ProtocVendoredError):
    """Raised when no vendored binary exists for the running platform."""

    def __init__(self, os_family: str, arch: str) -> None:
        self.os_family = os_family
        self.arch = arch
        super().__init__(f"protoc binary cannot be found for platform {os_family}-{arch}")


class MissingAssetError(ProtocVendoredError):
    """Raised when an expected vendored file or directory is absent."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{detail}: {path}")


class ProtocConfigError(ProtocVendoredError):
    """Raised for invalid runtime configuration."""


class ProtocStoreError(ProtocVendoredError):
    """Raised for store layout and write failures during maintenance."""


class ProtocFetchError(ProtocVendoredError):
    """Raised for release discovery and download failures."""


class ProtocArchiveError(ProtocVendoredError):
    """Raised when a release archive cannot be unpacked as expected."""


class ProtocCheckError(ProtocVendoredError):
    """Raised when the vendored binary cannot be executed for a check."""
