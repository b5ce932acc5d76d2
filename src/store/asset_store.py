"""Vendored asset store layout and access.

This module owns the on-disk layout of the vendored store: one executable
per supported target under ``bin/``, the ``include/`` bundle, and the
``version.txt`` marker. Reads verify existence explicitly; writes are used
only by the update workflow.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import (
    BIN_DIR_NAME,
    DESCRIPTOR_PROTO_RELATIVE_PATH,
    EXECUTABLE_FILE_MODE,
    INCLUDE_DIR_NAME,
    STORE_MARKER_FILE_NAME,
    VERSION_FILE_NAME,
)
from core.errors import MissingAssetError, ProtocStoreError
from core.types import SupportedTarget


class VendoredAssetStore:
    """Filesystem view of one vendored asset store root."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        """Absolute store root directory."""
        return self._root

    @property
    def bin_dir(self) -> Path:
        return self._root / BIN_DIR_NAME

    @property
    def include_dir(self) -> Path:
        return self._root / INCLUDE_DIR_NAME

    @property
    def version_file(self) -> Path:
        return self._root / VERSION_FILE_NAME

    @property
    def marker_file(self) -> Path:
        return self._root / STORE_MARKER_FILE_NAME

    def expected_binary_path(self, target: SupportedTarget) -> Path:
        """Return where a target's executable lives, without checking it."""
        return self.bin_dir / target.binary_file_name

    def binary_path(self, target: SupportedTarget) -> Path:
        """Return the existing executable path for a target.

        Args:
            target: Supported target to look up.

        Returns:
            Absolute path to the vendored executable.

        Raises:
            MissingAssetError: If the executable is absent.
        """
        path = self.expected_binary_path(target)
        if not path.is_file():
            raise MissingAssetError(path, f"internal: protoc not found for {target.target_id}")
        return path

    def include_path(self) -> Path:
        """Return the existing include bundle directory.

        Raises:
            MissingAssetError: If the include directory is absent.
        """
        if not self.include_dir.is_dir():
            raise MissingAssetError(self.include_dir, "protoc include directory not found")
        return self.include_dir

    def descriptor_proto_path(self) -> Path:
        """Return the bundled ``descriptor.proto`` path, without checking it."""
        return self.include_dir / DESCRIPTOR_PROTO_RELATIVE_PATH

    def read_version(self) -> str:
        """Read the vendored upstream release tag.

        Raises:
            MissingAssetError: If the marker is absent or empty.
        """
        if not self.version_file.is_file():
            raise MissingAssetError(self.version_file, "protoc version marker not found")
        release_tag = self.version_file.read_text(encoding="utf-8").strip()
        if not release_tag:
            raise MissingAssetError(self.version_file, "protoc version marker is empty")
        return release_tag

    def require_marker(self) -> None:
        """Ensure the root is a vendored store before any write.

        Raises:
            ProtocStoreError: If the store marker file is missing.
        """
        if not self.marker_file.is_file():
            raise ProtocStoreError(
                f"Refusing to update {self._root}: {STORE_MARKER_FILE_NAME} not found. "
                "Point --store-root or PROTOC_VENDORED_ROOT at a vendored store directory."
            )

    def write_version(self, release_tag: str) -> Path:
        """Write the version marker and return its path."""
        try:
            self.version_file.write_text(release_tag + "\n", encoding="utf-8")
        except OSError as error:
            raise ProtocStoreError(
                f"Failed to write version marker {self.version_file}: {error}"
            ) from error
        return self.version_file

    def write_binary(self, target: SupportedTarget, payload: bytes) -> Path:
        """Write one target executable and mark it executable.

        Args:
            target: Target the payload belongs to.
            payload: Raw executable bytes.

        Returns:
            Written executable path.

        Raises:
            ProtocStoreError: If the file cannot be written.
        """
        path = self.expected_binary_path(target)
        try:
            self.bin_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
            if not target.windows:
                path.chmod(EXECUTABLE_FILE_MODE)
        except OSError as error:
            raise ProtocStoreError(f"Failed to write protoc binary {path}: {error}") from error
        return path
