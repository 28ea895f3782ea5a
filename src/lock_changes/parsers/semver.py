"""Semantic version ordering built atop the semver package.

npm versions follow SemVer 2.0:
- a leading ``v`` or ``=`` is tolerated (e.g., "v1.2.3", "=1.2.3")
- any pre-release sorts before its release ("1.0.0-1" < "1.0.0")
- build metadata is ignored for ordering ("1.0.0+build.5" == "1.0.0")
- partial versions are padded ("1.2" == "1.2.0")
"""

from __future__ import annotations

from semver import Version


class InvalidVersionError(ValueError):
    """Raised when a version string is not a semantic version."""


def _parse_version(v: str) -> Version:
    cleaned = v.strip().lstrip("=v").split("+", 1)[0]
    try:
        return Version.parse(cleaned, optional_minor_and_patch=True)
    except ValueError as exc:
        raise InvalidVersionError(f"Cannot compare version '{v}'") from exc


def compare(a: str, b: str) -> int:
    """Return 1 if ``a`` > ``b``, -1 if ``a`` < ``b`` and 0 when they are equal."""
    return _parse_version(a).compare(_parse_version(b))
