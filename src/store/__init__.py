"""Vendored asset store layer.

This package owns the on-disk store of per-target protoc binaries,
the include bundle, and the version marker, plus runtime path lookups.
"""
