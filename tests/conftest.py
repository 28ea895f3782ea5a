"""Shared test fixtures for package-lock-changes."""

from __future__ import annotations

import base64
import json
from typing import Any

import pytest
import requests
import structlog

from lock_changes.log import setup_logging


@pytest.fixture(autouse=True)
def _logging():
    setup_logging("debug")
    yield
    structlog.reset_defaults()


PACKAGE_LOCK_V3 = {
    "name": "demo",
    "version": "1.0.0",
    "lockfileVersion": 3,
    "requires": True,
    "packages": {
        "": {"name": "demo", "version": "1.0.0", "dependencies": {"lodash": "^4.17.0"}},
        "node_modules/lodash": {"version": "4.17.21"},
        "node_modules/@babel/core": {"version": "7.24.0"},
        "node_modules/debug": {"version": "4.3.4"},
        "node_modules/debug/node_modules/ms": {"version": "2.1.2"},
        "node_modules/ms": {"version": "2.1.3"},
        "node_modules/only-nested-parent/node_modules/left-pad": {"version": "1.3.0"},
        "node_modules/local-lib": {"resolved": "packages/local-lib", "link": True},
        "packages/local-lib": {"version": "0.0.1"},
    },
}

PACKAGE_LOCK_V1 = {
    "name": "demo",
    "version": "1.0.0",
    "lockfileVersion": 1,
    "dependencies": {
        "lodash": {"version": "4.17.20"},
        "@babel/core": {"version": "7.23.0"},
    },
}

YARN_LOCK_V1 = """\
# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.
# yarn lockfile v1


"@babel/code-frame@^7.0.0", "@babel/code-frame@^7.22.13":
  version "7.22.13"
  resolved "https://registry.yarnpkg.com/@babel/code-frame/-/code-frame-7.22.13.tgz"
  dependencies:
    chalk "^2.4.2"

chalk@^2.4.2:
  version "2.4.2"
  resolved "https://registry.yarnpkg.com/chalk/-/chalk-2.4.2.tgz"

lodash@^3.0.0:
  version "3.10.1"

lodash@^4.17.21:
  version "4.17.21"
"""

YARN_LOCK_BERRY = """\
# This file is generated by running "yarn install" inside your project.

__metadata:
  version: 6
  cacheKey: 8

"@babel/code-frame@npm:^7.0.0, @babel/code-frame@npm:^7.22.13":
  version: 7.22.13
  resolution: "@babel/code-frame@npm:7.22.13"

"chalk@npm:^2.4.2":
  version: 2.4.2
  resolution: "chalk@npm:2.4.2"
"""

PNPM_LOCK_V6 = """\
lockfileVersion: '6.0'

dependencies:
  react:
    specifier: ^18.2.0
    version: 18.2.0

packages:

  /react@18.2.0:
    resolution: {integrity: sha512-abc}
    dev: false

  /@types/node@20.11.5:
    resolution: {integrity: sha512-def}
    dev: true

  /react-dom@18.2.0(react@18.2.0):
    resolution: {integrity: sha512-ghi}
    dev: false
"""

PNPM_LOCK_V5 = """\
lockfileVersion: 5.4

packages:

  /react/17.0.2:
    resolution: {integrity: sha512-abc}

  /@types/node/18.0.0:
    resolution: {integrity: sha512-def}

  /react-dom/17.0.2_react@17.0.2:
    resolution: {integrity: sha512-ghi}
"""


@pytest.fixture
def package_lock_text() -> str:
    return json.dumps(PACKAGE_LOCK_V3, indent=2)


@pytest.fixture
def base_package_lock_text() -> str:
    base = json.loads(json.dumps(PACKAGE_LOCK_V3))
    packages = base["packages"]
    packages["node_modules/lodash"] = {"version": "4.17.20"}
    packages["node_modules/debug"] = {"version": "4.3.5"}
    del packages["node_modules/@babel/core"]
    packages["node_modules/left-pad"] = {"version": "1.3.0"}
    return json.dumps(base, indent=2)


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        links: dict[str, dict[str, str]] | None = None,
        text: str | None = None,
    ) -> None:
        self._payload = payload
        self._text = text
        self.status_code = status_code
        self.links = links or {}

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records requests and replays queued responses keyed by (method, url)."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self.responses: dict[tuple[str, str], list[FakeResponse]] = {}

    def queue(self, method: str, url: str, response: FakeResponse) -> None:
        self.responses.setdefault((method, url), []).append(response)

    def _dispatch(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        queued = self.responses.get((method, url))
        if not queued:
            return FakeResponse(status_code=404)
        return queued.pop(0)

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._dispatch("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._dispatch("POST", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._dispatch("PATCH", url, **kwargs)


def encode_content(text: str) -> str:
    """Base64-encode like the contents API does (wrapped at 60 characters)."""
    raw = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(raw[i : i + 60] for i in range(0, len(raw), 60)) + "\n"


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
