"""Public SDK surface for protoc-vendored.

This module provides a stable import path for downstream consumers.
It re-exports the path lookups and the errors they raise.
"""

from __future__ import annotations

from core.errors import MissingAssetError, ProtocVendoredError, UnsupportedPlatformError
from core.platform_targets import supported_target_ids as supported_targets
from store.path_resolver import binary_path, include_path, vendored_version

__all__ = [
    "MissingAssetError",
    "ProtocVendoredError",
    "UnsupportedPlatformError",
    "binary_path",
    "include_path",
    "supported_targets",
    "vendored_version",
]
