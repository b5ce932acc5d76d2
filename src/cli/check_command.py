"""Check command wiring for the protoc-vendored CLI."""

from __future__ import annotations

from typing import Any

from core.config import VendoredConfig
from store.asset_store import VendoredAssetStore
from store.binary_check import render_check_report, run_store_checks


def add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    subparsers.add_parser(
        "check",
        help="Run the host binary with --version and check the include bundle",
    )


def run_check_command(config: VendoredConfig) -> int:
    """Execute store checks and print the report."""
    results = run_store_checks(VendoredAssetStore(config.store_root))
    print(render_check_report(results))
    return 0 if all(result.passed for result in results) else 1
