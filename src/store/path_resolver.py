"""Runtime path resolution for the vendored protoc binary.

Resolution is a pure lookup: detect the host platform, map it through the
target table, and check that the expected file exists in the store.
"""

from __future__ import annotations

from pathlib import Path

from core.config import resolve_store_root
from core.platform_targets import detect_host_platform, resolve_target
from core.types import HostPlatform
from store.asset_store import VendoredAssetStore


def binary_path(host: HostPlatform | None = None, store_root: Path | None = None) -> Path:
    """Return the vendored protoc executable for a host platform.

    Args:
        host: Platform to resolve for; defaults to the running process.
        store_root: Store root override; defaults to configuration.

    Returns:
        Absolute path to an existing executable.

    Raises:
        UnsupportedPlatformError: If the platform has no vendored target.
        MissingAssetError: If the target's executable is absent.
    """
    target = resolve_target(host or detect_host_platform())
    return open_store(store_root).binary_path(target)


def include_path(store_root: Path | None = None) -> Path:
    """Return the bundled include directory.

    Raises:
        MissingAssetError: If the include directory is absent.
    """
    return open_store(store_root).include_path()


def vendored_version(store_root: Path | None = None) -> str:
    """Return the upstream release tag recorded in the store."""
    return open_store(store_root).read_version()


def open_store(store_root: Path | None = None) -> VendoredAssetStore:
    """Build a store view for an explicit or configured root."""
    if store_root is None:
        store_root = resolve_store_root()
    return VendoredAssetStore(Path(store_root).expanduser().resolve())
