"""Installed package version, shown by ``staticblog --version``."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    STATICBLOG_VERSION = version("staticblog")
except PackageNotFoundError:
    # running from a checkout that was never installed
    STATICBLOG_VERSION = "0.0.0+local"

__all__ = ["STATICBLOG_VERSION"]
