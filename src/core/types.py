"""Shared typed models.

This module defines immutable data models used by the resolver, the
asset store, and the update workflow to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import BINARY_STEM, WINDOWS_EXECUTABLE_SUFFIX


@dataclass(frozen=True)
class SupportedTarget:
    """One vendored (operating system, architecture) target.

    Attributes:
        target_id: Upstream release archive suffix, e.g. ``linux-x86_64``.
        windows: Whether the target ships a ``.exe`` executable.
    """

    target_id: str
    windows: bool = False

    @property
    def binary_file_name(self) -> str:
        """File name of the vendored executable inside ``bin/``."""
        suffix = WINDOWS_EXECUTABLE_SUFFIX if self.windows else ""
        return f"{BINARY_STEM}-{self.target_id}{suffix}"

    @property
    def archive_member(self) -> str:
        """Path of the executable inside the upstream release zip."""
        suffix = WINDOWS_EXECUTABLE_SUFFIX if self.windows else ""
        return f"bin/{BINARY_STEM}{suffix}"

    def archive_name(self, release_tag: str) -> str:
        """Upstream zip file name for a release tag such as ``v29.3``."""
        return f"{BINARY_STEM}-{release_tag.removeprefix('v')}-{self.target_id}.zip"


@dataclass(frozen=True)
class HostPlatform:
    """Normalized operating system family and CPU architecture.

    Attributes:
        os_family: One of ``linux``, ``macos``, ``windows`` or a raw lowercased name.
        arch: One of ``x86``, ``x86_64``, ``aarch64``, ``powerpc64`` or a raw name.
    """

    os_family: str
    arch: str


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of one store update run.

    Attributes:
        release_tag: Upstream release tag now vendored.
        binary_paths: Written executables in target table order.
        include_path: Replaced include bundle directory.
        version_path: Written version marker file.
    """

    release_tag: str
    binary_paths: tuple[Path, ...]
    include_path: Path
    version_path: Path


@dataclass(frozen=True)
class CheckResult:
    """One operator check outcome."""

    name: str
    passed: bool
    detail: str
