"""Store update workflow.

This module refreshes the vendored store from the latest upstream release:
it records the release tag, downloads one archive per supported target,
extracts each executable, and replaces the include bundle. Steps run in
sequence and the first failure aborts the run without rollback.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from core.config import VendoredConfig
from core.constants import INCLUDE_SOURCE_TARGET_ID
from core.errors import ProtocStoreError
from core.logging_config import get_logger
from core.platform_targets import SUPPORTED_TARGETS
from core.types import SupportedTarget, UpdateResult
from fetch.archive_extract import read_archive_member, replace_include_tree
from fetch.release_client import (
    build_archive_url,
    create_http_client,
    download_archive,
    fetch_latest_release_tag,
)
from store.asset_store import VendoredAssetStore

_LOGGER = get_logger(__name__)


def run_update(
    config: VendoredConfig,
    release_tag: str | None = None,
    client: httpx.Client | None = None,
) -> UpdateResult:
    """Update every vendored binary, the include bundle, and the version marker.

    Args:
        config: Runtime config with store root and upstream URLs.
        release_tag: Optional explicit tag; the latest release when omitted.
        client: Optional HTTP client; one is created and closed when omitted.

    Returns:
        Summary of the written store contents.

    Raises:
        ProtocStoreError: If the store root is not a vendored store.
        ProtocFetchError: If release discovery or a download fails.
        ProtocArchiveError: If an archive lacks the expected files.
    """
    store = VendoredAssetStore(config.store_root)
    store.require_marker()
    _LOGGER.info("update_started", store_root=str(store.root))
    if client is not None:
        return _update_store(store, config, client, release_tag)
    with create_http_client(config) as owned_client:
        return _update_store(store, config, owned_client, release_tag)


def _update_store(
    store: VendoredAssetStore,
    config: VendoredConfig,
    client: httpx.Client,
    release_tag: str | None,
) -> UpdateResult:
    tag = release_tag or fetch_latest_release_tag(client, config)
    _LOGGER.info("release_resolved", release_tag=tag, explicit=release_tag is not None)
    version_path = store.write_version(tag)
    binary_paths: list[Path] = []
    include_path: Path | None = None
    for target in SUPPORTED_TARGETS:
        archive_bytes = _download_target_archive(client, config, tag, target)
        payload = read_archive_member(archive_bytes, target.archive_member)
        binary_path = store.write_binary(target, payload)
        binary_paths.append(binary_path)
        _LOGGER.info(
            "binary_written",
            target_id=target.target_id,
            path=str(binary_path),
            size_bytes=len(payload),
        )
        if target.target_id == INCLUDE_SOURCE_TARGET_ID:
            include_path = _replace_include(store, archive_bytes)
    if include_path is None:
        raise ProtocStoreError(
            f"No supported target provides the include bundle ({INCLUDE_SOURCE_TARGET_ID})."
        )
    _LOGGER.info(
        "update_finished",
        release_tag=tag,
        binary_count=len(binary_paths),
        include_path=str(include_path),
    )
    return UpdateResult(
        release_tag=tag,
        binary_paths=tuple(binary_paths),
        include_path=include_path,
        version_path=version_path,
    )


def _download_target_archive(
    client: httpx.Client,
    config: VendoredConfig,
    release_tag: str,
    target: SupportedTarget,
) -> bytes:
    url = build_archive_url(config, release_tag, target)
    archive_bytes = download_archive(client, url)
    _LOGGER.info(
        "archive_downloaded",
        target_id=target.target_id,
        url=url,
        size_bytes=len(archive_bytes),
    )
    return archive_bytes


def _replace_include(store: VendoredAssetStore, archive_bytes: bytes) -> Path:
    try:
        include_path = replace_include_tree(archive_bytes, store.include_dir)
    except OSError as error:
        raise ProtocStoreError(
            f"Failed to replace include bundle {store.include_dir}: {error}"
        ) from error
    _LOGGER.info("include_replaced", path=str(include_path))
    return include_path
