"""Update command wiring for the protoc-vendored CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import VendoredConfig
from fetch.updater import run_update


def add_update_command(subparsers: Any) -> None:
    """Register update subcommand."""
    parser = subparsers.add_parser(
        "update",
        help="Download the latest protoc release into the vendored store",
    )
    parser.add_argument("--tag", help="Explicit release tag, e.g. v29.3 (default: latest)")


def run_update_command(config: VendoredConfig, args: argparse.Namespace) -> int:
    """Run the store update and print the written paths."""
    result = run_update(config, release_tag=args.tag)
    print(f"release_tag={result.release_tag}")
    for binary_path in result.binary_paths:
        print(f"binary_path={binary_path}")
    print(f"include_path={result.include_path}")
    print(f"version_path={result.version_path}")
    return 0
