"""protoc-vendored CLI entry points.

This module exposes path lookups and store maintenance commands.
It maps argparse commands onto SDK and workflow calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, Sequence

from cli.check_command import add_check_command, run_check_command
from cli.update_command import add_update_command, run_update_command
from core.config import VendoredConfig
from core.errors import ProtocVendoredError
from core.platform_targets import supported_target_ids
from store.path_resolver import binary_path, include_path, vendored_version


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="protoc-vendored",
        description="Vendored protoc binaries and include files",
    )
    parser.add_argument("--store-root", help="Override PROTOC_VENDORED_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_lookup_commands(subparsers)
    add_update_command(subparsers)
    add_check_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the protoc-vendored CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.store_root)
        return _dispatch(parser, config, args)
    except ProtocVendoredError as error:
        print(f"error={error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    config: VendoredConfig,
    args: argparse.Namespace,
) -> int:
    if args.command == "path":
        print(binary_path(store_root=config.store_root))
        return 0
    if args.command == "include":
        print(include_path(store_root=config.store_root))
        return 0
    if args.command == "version":
        print(vendored_version(store_root=config.store_root))
        return 0
    if args.command == "targets":
        for target_id in supported_target_ids():
            print(target_id)
        return 0
    if args.command == "update":
        return run_update_command(config, args)
    if args.command == "check":
        return run_check_command(config)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(store_root: str | None) -> VendoredConfig:
    """Build runtime config with optional store-root override.

    Args:
        store_root: Optional override path.

    Returns:
        Validated config.
    """
    config = VendoredConfig.from_env()
    if store_root:
        config = replace(config, store_root=Path(store_root).expanduser().resolve())
    return config


def _add_lookup_commands(subparsers: Any) -> None:
    """Register read-only lookup subcommands."""
    subparsers.add_parser("path", help="Print the protoc binary path for this platform")
    subparsers.add_parser("include", help="Print the bundled include directory")
    subparsers.add_parser("version", help="Print the vendored protobuf release tag")
    subparsers.add_parser("targets", help="List supported platform targets")
