"""Unit tests for vendored asset store reads and writes."""

from __future__ import annotations

import os
import stat

import pytest

from core.errors import MissingAssetError, ProtocStoreError
from core.platform_targets import LINUX_X86_64, WIN32
from store.asset_store import VendoredAssetStore
from tests.store_fixtures import build_store


def test_require_marker_rejects_unmarked_directory(tmp_path) -> None:
    """Writes should be refused for directories that are not stores."""
    store = VendoredAssetStore(tmp_path)

    with pytest.raises(ProtocStoreError):
        store.require_marker()


def test_require_marker_accepts_store(tmp_path) -> None:
    """A directory carrying README.md should pass the marker check."""
    store = VendoredAssetStore(build_store(tmp_path / "store"))

    store.require_marker()

    assert store.marker_file.is_file()


def test_write_binary_creates_bin_dir_and_marks_executable(tmp_path) -> None:
    """Unix targets should be written with an executable mode."""
    store = VendoredAssetStore(tmp_path)

    path = store.write_binary(LINUX_X86_64, b"\x7fELF")

    assert path.read_bytes() == b"\x7fELF"
    if os.name == "posix":
        assert path.stat().st_mode & stat.S_IXUSR


def test_write_binary_uses_exe_name_for_windows(tmp_path) -> None:
    """The Windows target should be written with the .exe suffix."""
    store = VendoredAssetStore(tmp_path)

    path = store.write_binary(WIN32, b"MZ")

    assert path == tmp_path / "bin" / "protoc-win32.exe"


def test_write_version_round_trips_through_read(tmp_path) -> None:
    """A written version marker should be read back without the newline."""
    store = VendoredAssetStore(tmp_path)

    store.write_version("v29.3")

    assert store.version_file.read_text(encoding="utf-8") == "v29.3\n"
    assert store.read_version() == "v29.3"


def test_read_version_rejects_empty_marker(tmp_path) -> None:
    """An empty version marker should be treated as missing."""
    store = VendoredAssetStore(tmp_path)
    store.version_file.write_text("\n", encoding="utf-8")

    with pytest.raises(MissingAssetError):
        store.read_version()


def test_binary_path_rejects_directory_in_place_of_file(tmp_path) -> None:
    """A directory at the binary location should not count as an asset."""
    store = VendoredAssetStore(tmp_path)
    store.expected_binary_path(LINUX_X86_64).mkdir(parents=True)

    with pytest.raises(MissingAssetError):
        store.binary_path(LINUX_X86_64)
