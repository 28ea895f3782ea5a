"""Parse npm package-lock.json / npm-shrinkwrap.json into resolved versions."""

from __future__ import annotations

import json

from ..errors import LockfileParseError

_NODE_MODULES = "node_modules/"


def parse(text: str) -> dict[str, str]:
    """Return a package -> version mapping from lockfile text.

    Supports npm v2+ ("packages" map) and v1 ("dependencies" tree). Nested
    installs only fill in names with no top-level entry.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LockfileParseError(f"Invalid JSON in lockfile: {exc}") from exc

    if not isinstance(data, dict):
        raise LockfileParseError("Lockfile must be a JSON object")

    # npm v2+ format
    packages = data.get("packages")
    if isinstance(packages, dict):
        return _parse_packages(packages)

    # npm v1 format fallback
    deps = data.get("dependencies")
    if isinstance(deps, dict):
        return _parse_dependencies(deps)

    return {}


def _parse_packages(packages: dict) -> dict[str, str]:
    versions: dict[str, str] = {}
    for key, meta in packages.items():
        if not isinstance(meta, dict) or _NODE_MODULES not in key:
            # "" is the root project, workspace folders have no node_modules prefix
            continue
        version = meta.get("version")
        if not version or meta.get("link"):
            continue
        name = key.rsplit(_NODE_MODULES, 1)[1]
        nested = key.count(_NODE_MODULES) > 1 or not key.startswith(_NODE_MODULES)
        if nested:
            versions.setdefault(name, str(version))
        else:
            versions[name] = str(version)
    return versions


def _parse_dependencies(deps: dict) -> dict[str, str]:
    versions: dict[str, str] = {}
    for name, meta in deps.items():
        if isinstance(meta, dict) and "version" in meta:
            versions[name] = str(meta["version"])
    return versions
