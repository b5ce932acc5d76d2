"""Upstream release fetching.

This package downloads protoc release archives from the upstream
project and unpacks them into the vendored asset store.
"""
