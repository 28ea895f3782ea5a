"""Parse pnpm-lock.yaml to capture resolved dependencies."""

from __future__ import annotations

import re

import yaml

from ..errors import LockfileParseError

# v5: "/name/1.2.3" or "/@scope/name/1.2.3_peer@1.0.0"
_V5_KEY = re.compile(r"^/?(?P<name>(?:@[^/]+/)?[^/@]+)/(?P<version>\d[^_/]*)")
# v6: "/name@1.2.3(peer@1.0.0)", v9: "name@1.2.3"
_V6_KEY = re.compile(r"^/?(?P<name>@?[^@(]+)@(?P<version>[^(]+)")


def parse(text: str) -> dict[str, str]:
    """Return a package -> version mapping from pnpm lock text."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise LockfileParseError(f"Invalid YAML in pnpm lockfile: {exc}") from exc

    if not isinstance(data, dict):
        raise LockfileParseError("pnpm lockfile must be a YAML mapping")

    pkgs = data.get("packages") or {}

    versions: dict[str, str] = {}
    for key in pkgs.keys():
        if not isinstance(key, str):
            continue
        match = _V5_KEY.match(key) or _V6_KEY.match(key)
        if match is None:
            continue
        versions[match["name"]] = match["version"]

    return versions
