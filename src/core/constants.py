"""Core constants used across protoc-vendored modules.

This module centralizes store layout names and upstream endpoints.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_STORE_ROOT = Path(__file__).resolve().parent.parent / "store" / "vendor"
BIN_DIR_NAME = "bin"
INCLUDE_DIR_NAME = "include"
VERSION_FILE_NAME = "version.txt"
STORE_MARKER_FILE_NAME = "README.md"
BINARY_STEM = "protoc"
WINDOWS_EXECUTABLE_SUFFIX = ".exe"
INCLUDE_SOURCE_TARGET_ID = "linux-x86_64"
DESCRIPTOR_PROTO_RELATIVE_PATH = "google/protobuf/descriptor.proto"
DEFAULT_RELEASES_API_URL = "https://api.github.com/repos/protocolbuffers/protobuf/releases/latest"
DEFAULT_DOWNLOAD_BASE_URL = "https://github.com/protocolbuffers/protobuf/releases/download"
DEFAULT_HTTP_TIMEOUT_SECONDS = 60.0
EXECUTABLE_FILE_MODE = 0o755
PROTOC_VERSION_MARKER = "libprotoc"
