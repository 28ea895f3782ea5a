"""Data models for lockfile diffs."""

from __future__ import annotations

from .change import PLACEHOLDER, STATUS_ORDER, Change
from .package_entry import PackageEntry

__all__ = [
    "Change",
    "PackageEntry",
    "PLACEHOLDER",
    "STATUS_ORDER",
]
