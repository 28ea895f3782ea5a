"""Core lockfile diffing entrypoints.

This module MUST NOT contain GitHub-specific dependencies so it can be used by
both the Action wrapper and the local CLI script.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import PurePosixPath

from .log import get_logger
from .models import Change
from .parsers.package_lock import parse as parse_package_lock
from .parsers.pnpm_lock import parse as parse_pnpm_lock
from .parsers.semver import InvalidVersionError, compare
from .parsers.yarn_lock import parse as parse_yarn_lock

logger = get_logger("core")

Parser = Callable[[str], dict[str, str]]

PARSERS_BY_FILENAME: dict[str, Parser] = {
    "package-lock.json": parse_package_lock,
    "npm-shrinkwrap.json": parse_package_lock,
    "pnpm-lock.yaml": parse_pnpm_lock,
    "yarn.lock": parse_yarn_lock,
}


def _sniff_parser(text: str) -> Parser:
    stripped = text.lstrip()
    if stripped.startswith("{"):
        return parse_package_lock
    if stripped.startswith("lockfileVersion"):
        return parse_pnpm_lock
    return parse_yarn_lock


def parse_lock(text: str, path: str = "package-lock.json") -> dict[str, str]:
    """Parse lockfile text into a package -> version mapping.

    The format is chosen from the file name of ``path``; unknown names fall
    back to inspecting the content.
    """
    filename = PurePosixPath(path.replace("\\", "/")).name
    parser = PARSERS_BY_FILENAME.get(filename) or _sniff_parser(text)
    return parser(text)


def _is_downgrade(name: str, previous: str, current: str) -> bool:
    try:
        return compare(previous, current) == 1
    except InvalidVersionError as exc:
        logger.warning("version_not_comparable", package=name, error=str(exc))
        return False


def diff_locks(previous: Mapping[str, str], current: Mapping[str, str]) -> dict[str, Change]:
    """Classify every package that differs between two snapshots.

    Packages pinned to the same version in both snapshots are left out.
    """
    changes: dict[str, Change] = {}

    for name, version in previous.items():
        changes[name] = Change.removed(version)

    for name, version in current.items():
        change = changes.get(name)
        if change is None:
            changes[name] = Change.added(version)
        elif change.previous == version:
            del changes[name]
        else:
            change.current = version
            if _is_downgrade(name, change.previous, version):
                change.status = "downgraded"
            else:
                change.status = "updated"

    return changes


def count_statuses(changes: Mapping[str, Change]) -> dict[str, int]:
    """Return the number of changes per status."""
    counts: dict[str, int] = {}
    for change in changes.values():
        counts[change.status] = counts.get(change.status, 0) + 1
    return counts
