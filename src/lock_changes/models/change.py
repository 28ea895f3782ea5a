"""Change record for a single package between two lockfile snapshots."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER = "-"

# Fixed order used for summary rows.
STATUS_ORDER = ("added", "updated", "downgraded", "removed")

_VALID_STATUSES = set(STATUS_ORDER)


@dataclass
class Change:
    """Describe how one package moved between the base and head lockfiles."""

    previous: str
    current: str
    status: str

    def __post_init__(self) -> None:
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")

    def to_dict(self) -> dict[str, str]:
        return {
            "previous": self.previous,
            "current": self.current,
            "status": self.status,
        }

    @classmethod
    def added(cls, version: str) -> Change:
        return cls(previous=PLACEHOLDER, current=version, status="added")

    @classmethod
    def removed(cls, version: str) -> Change:
        return cls(previous=version, current=PLACEHOLDER, status="removed")
