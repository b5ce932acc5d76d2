"""Operator checks for a vendored store.

Checks run the resolved binary with ``--version`` and confirm the include
bundle carries ``descriptor.proto``. Each check reports a result row
instead of raising, so the CLI can print a full report.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from core.constants import PROTOC_VERSION_MARKER
from core.errors import ProtocCheckError, ProtocVendoredError
from core.platform_targets import detect_host_platform, resolve_target
from core.types import CheckResult, HostPlatform
from store.asset_store import VendoredAssetStore


def run_store_checks(
    store: VendoredAssetStore,
    host: HostPlatform | None = None,
) -> tuple[CheckResult, ...]:
    """Run all operator checks against a store."""
    return (
        _check_binary(store, host or detect_host_platform()),
        _check_include(store),
    )


def read_protoc_version(protoc_path: Path) -> str:
    """Run ``protoc --version`` and return its stdout.

    Raises:
        ProtocCheckError: If the binary cannot be executed.
    """
    try:
        completed = subprocess.run(
            [str(protoc_path), "--version"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as error:
        raise ProtocCheckError(f"Failed to run {protoc_path} --version: {error}") from error
    return completed.stdout.strip()


def render_check_report(results: tuple[CheckResult, ...]) -> str:
    """Render check results into stable multi-line text for CLI output."""
    lines = [
        f"[{'PASS' if result.passed else 'FAIL'}] {result.name} :: {result.detail}"
        for result in results
    ]
    failed_count = sum(1 for result in results if not result.passed)
    lines.append(f"passed={len(results) - failed_count}")
    lines.append(f"failed={failed_count}")
    return "\n".join(lines)


def _check_binary(store: VendoredAssetStore, host: HostPlatform) -> CheckResult:
    try:
        protoc_path = store.binary_path(resolve_target(host))
        stdout = read_protoc_version(protoc_path)
    except ProtocVendoredError as error:
        return CheckResult(name="protoc --version", passed=False, detail=str(error))
    if PROTOC_VERSION_MARKER not in stdout:
        return CheckResult(
            name="protoc --version",
            passed=False,
            detail=f"unexpected output {stdout!r}",
        )
    return CheckResult(name="protoc --version", passed=True, detail=stdout)


def _check_include(store: VendoredAssetStore) -> CheckResult:
    descriptor_path = store.descriptor_proto_path()
    if not descriptor_path.is_file():
        return CheckResult(
            name="descriptor.proto",
            passed=False,
            detail=f"not found: {descriptor_path}",
        )
    return CheckResult(name="descriptor.proto", passed=True, detail=str(descriptor_path))
