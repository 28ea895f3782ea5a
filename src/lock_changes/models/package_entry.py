"""Package entry model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageEntry:
    """A resolved package and the version pinned by the lockfile."""

    name: str
    version: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if not self.version:
            raise ValueError(f"Package '{self.name}' must have a version")

    @staticmethod
    def name_from_key(key: str) -> str:
        """Return the package name from a lockfile key.

        Keys look like ``name@^1.0.0``, ``@scope/name@~2.1.0`` or, for yarn
        berry, ``name@npm:^1.0.0``. Multi-range headers (``a@^1, a@^1.2``) use
        the first range.
        """
        first = key.split(",", 1)[0].strip().strip('"')
        parts = first.split("@")
        if parts[0] == "" and len(parts) > 1:
            return f"@{parts[1]}"
        return parts[0]

    @classmethod
    def from_key(cls, key: str, version: str) -> PackageEntry:
        return cls(name=cls.name_from_key(key), version=str(version))
