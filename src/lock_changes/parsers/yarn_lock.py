"""Parse yarn.lock to capture resolved dependencies.

Classic (v1) lockfiles use yarn's own indentation format; berry (v2+)
lockfiles are YAML and carry a ``__metadata`` entry.
"""

from __future__ import annotations

import yaml

from ..errors import LockfileParseError
from ..models import PackageEntry


def parse(text: str) -> dict[str, str]:
    """Return a package -> version mapping from yarn lock text.

    When a package resolves to several versions, the last entry wins.
    """
    if "__metadata:" in text:
        return _parse_berry(text)
    return _parse_classic(text)


def _parse_classic(text: str) -> dict[str, str]:
    versions: dict[str, str] = {}

    current_name: str | None = None
    for raw in text.splitlines():
        line = raw.rstrip()
        if not line or line.lstrip().startswith("#"):
            continue
        if not line.startswith(" "):
            if not line.endswith(":"):
                raise LockfileParseError(f"Unexpected line in yarn lockfile: {line!r}")
            current_name = PackageEntry.name_from_key(line[:-1])
            continue
        stripped = line.strip()
        if current_name and line.startswith("  ") and not line.startswith("   "):
            if stripped.startswith("version "):
                version = stripped[len("version ") :].strip().strip('"')
                if version:
                    versions[current_name] = version
                current_name = None

    return versions


def _parse_berry(text: str) -> dict[str, str]:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise LockfileParseError(f"Invalid YAML in yarn lockfile: {exc}") from exc

    if not isinstance(data, dict):
        raise LockfileParseError("yarn lockfile must be a YAML mapping")

    versions: dict[str, str] = {}
    for key, meta in data.items():
        if key == "__metadata" or not isinstance(meta, dict):
            continue
        version = meta.get("version")
        if version is None:
            continue
        entry = PackageEntry.from_key(str(key), str(version))
        versions[entry.name] = entry.version

    return versions
