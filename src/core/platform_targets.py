"""Supported target table and host platform detection.

The (os family, architecture) mapping is an explicit, exhaustive table.
Adding or removing a vendored target is a single edit to ``_TARGET_TABLE``,
and any pair outside the table fails instead of falling back to a default.
"""

from __future__ import annotations

import platform

from core.errors import UnsupportedPlatformError
from core.types import HostPlatform, SupportedTarget

LINUX_AARCH_64 = SupportedTarget("linux-aarch_64")
LINUX_PPCLE_64 = SupportedTarget("linux-ppcle_64")
LINUX_X86_32 = SupportedTarget("linux-x86_32")
LINUX_X86_64 = SupportedTarget("linux-x86_64")
OSX_X86_64 = SupportedTarget("osx-x86_64")
WIN32 = SupportedTarget("win32", windows=True)

SUPPORTED_TARGETS: tuple[SupportedTarget, ...] = (
    LINUX_AARCH_64,
    LINUX_PPCLE_64,
    LINUX_X86_32,
    LINUX_X86_64,
    OSX_X86_64,
    WIN32,
)

_TARGET_TABLE: dict[tuple[str, str], SupportedTarget] = {
    ("linux", "x86"): LINUX_X86_32,
    ("linux", "x86_64"): LINUX_X86_64,
    ("linux", "aarch64"): LINUX_AARCH_64,
    ("linux", "powerpc64"): LINUX_PPCLE_64,
    ("macos", "x86_64"): OSX_X86_64,
    ("windows", "x86"): WIN32,
    ("windows", "x86_64"): WIN32,
    ("windows", "aarch64"): WIN32,
}

_OS_ALIASES = {
    "linux": "linux",
    "darwin": "macos",
    "windows": "windows",
}

_ARCH_ALIASES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "x86": "x86",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "ppc64le": "powerpc64",
    "powerpc64le": "powerpc64",
}


def normalize_host_platform(system: str, machine: str) -> HostPlatform:
    """Normalize raw ``platform.system()``/``platform.machine()`` values.

    Unknown values are passed through lowercased so that the target lookup
    rejects them rather than guessing.
    """
    system_key = system.strip().lower()
    machine_key = machine.strip().lower()
    return HostPlatform(
        os_family=_OS_ALIASES.get(system_key, system_key),
        arch=_ARCH_ALIASES.get(machine_key, machine_key),
    )


def detect_host_platform() -> HostPlatform:
    """Read the running process's platform identifiers."""
    return normalize_host_platform(platform.system(), platform.machine())


def resolve_target(host: HostPlatform) -> SupportedTarget:
    """Map a host platform to its vendored target.

    Args:
        host: Normalized host platform.

    Returns:
        The matching supported target.

    Raises:
        UnsupportedPlatformError: If the pair is not in the target table.
    """
    target = _TARGET_TABLE.get((host.os_family, host.arch))
    if target is None:
        raise UnsupportedPlatformError(host.os_family, host.arch)
    return target


def supported_target_ids() -> tuple[str, ...]:
    """Return supported target ids in update order."""
    return tuple(target.target_id for target in SUPPORTED_TARGETS)
