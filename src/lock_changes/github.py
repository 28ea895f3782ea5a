"""GitHub REST API access for the Action.

Only this module talks to GitHub. The pull request context comes from the
environment the Actions runner provides.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import requests
from jsonschema import Draft202012Validator

from .errors import BaseLockFetchError, CommentListError, PullRequestContextError

DEFAULT_API_URL = "https://api.github.com"
REQUEST_TIMEOUT = 10

CONTENTS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["content"],
    "properties": {
        "content": {"type": "string"},
        "encoding": {"type": "string"},
        "sha": {"type": "string"},
    },
}

BLOB_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["content"],
    "properties": {
        "content": {"type": "string", "minLength": 1},
        "encoding": {"const": "base64"},
    },
}

COMMENTS_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id"],
        "properties": {
            "id": {"type": "integer"},
            "body": {"type": ["string", "null"]},
            "user": {"type": ["object", "null"]},
        },
    },
}


def _is_valid(document: Any, schema: dict[str, Any]) -> bool:
    return Draft202012Validator(schema).is_valid(document)


@dataclass(slots=True, frozen=True)
class PullRequestContext:
    """Repository and pull request the workflow runs for."""

    owner: str
    repo: str
    number: int
    base_ref: str | None = None
    api_url: str = DEFAULT_API_URL

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_event(
        cls,
        event: Mapping[str, Any],
        repository: str,
        api_url: str = DEFAULT_API_URL,
    ) -> PullRequestContext:
        """Build the context from a webhook payload and ``owner/repo``."""
        issue = event.get("issue") or {}
        pull_request = event.get("pull_request") or {}
        number = issue.get("number") or pull_request.get("number") or event.get("number")
        if not number:
            raise PullRequestContextError("💥 Cannot find the PR, aborting!")

        owner, _, repo = repository.partition("/")
        if not owner or not repo:
            raise PullRequestContextError(
                f"💥 Invalid repository '{repository}', expected 'owner/repo', aborting!"
            )

        base_ref = (pull_request.get("base") or {}).get("ref")
        return cls(
            owner=owner,
            repo=repo,
            number=int(number),
            base_ref=base_ref or None,
            api_url=api_url.rstrip("/"),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> PullRequestContext:
        """Read ``GITHUB_EVENT_PATH``, ``GITHUB_REPOSITORY`` and ``GITHUB_API_URL``."""
        event: dict[str, Any] = {}
        event_path = environ.get("GITHUB_EVENT_PATH")
        if event_path and Path(event_path).exists():
            event = json.loads(Path(event_path).read_text(encoding="utf-8"))

        return cls.from_event(
            event,
            repository=environ.get("GITHUB_REPOSITORY", ""),
            api_url=environ.get("GITHUB_API_URL") or DEFAULT_API_URL,
        )


class GitHubClient:
    """Thin wrapper over the GitHub REST endpoints the Action needs.

    HTTP error statuses surface as ``requests.HTTPError``. Each request
    carries a REQUEST_TIMEOUT; a timeout is fatal like any other error and
    is never retried.
    """

    def __init__(
        self,
        token: str,
        repository: str,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.repository = repository
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github+json",
            }
        )

    @classmethod
    def for_context(cls, token: str, context: PullRequestContext) -> GitHubClient:
        return cls(token, context.repository, api_url=context.api_url)

    @property
    def repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.repository}"

    def _get(self, url: str, params: dict[str, Any] | None = None) -> requests.Response:
        response = self.session.get(url, params=params, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response

    def fetch_file(self, path: str, ref: str | None = None) -> bytes:
        """Return the decoded content of ``path`` on ``ref`` (default branch if None)."""
        params = {"ref": ref} if ref else None
        response = self._get(f"{self.repo_url}/contents/{path.lstrip('/')}", params=params)
        data = _json_or_none(response)

        if not _is_valid(data, CONTENTS_SCHEMA):
            raise BaseLockFetchError("💥 Cannot fetch base lock, aborting!")

        content = data["content"]
        if not content and data.get("encoding") == "none" and data.get("sha"):
            # Files over 1 MB are served without inline content.
            content = self._fetch_blob(data["sha"])
        if not content:
            raise BaseLockFetchError("💥 Cannot fetch base lock, aborting!")

        return _decode_base64(content)

    def _fetch_blob(self, sha: str) -> str:
        data = _json_or_none(self._get(f"{self.repo_url}/git/blobs/{sha}"))
        if not _is_valid(data, BLOB_SCHEMA):
            raise BaseLockFetchError("💥 Cannot fetch base lock, aborting!")
        return data["content"]

    def list_issue_comments(self, number: int) -> list[dict[str, Any]]:
        """Return every comment on the issue/PR, oldest first."""
        comments: list[dict[str, Any]] = []
        url: str | None = f"{self.repo_url}/issues/{number}/comments"
        params: dict[str, Any] | None = {"per_page": 100}

        while url:
            response = self._get(url, params=params)
            page = _json_or_none(response)
            if not _is_valid(page, COMMENTS_SCHEMA):
                raise CommentListError("💥 Cannot fetch PR comments, aborting!")
            comments.extend(page)
            # The next link already carries the query string.
            url = response.links.get("next", {}).get("url")
            params = None

        return comments

    def create_comment(self, number: int, body: str) -> dict[str, Any]:
        response = self.session.post(
            f"{self.repo_url}/issues/{number}/comments",
            json={"body": body},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()

    def update_comment(self, comment_id: int, body: str) -> dict[str, Any]:
        response = self.session.patch(
            f"{self.repo_url}/issues/comments/{comment_id}",
            json={"body": body},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()


def _json_or_none(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _decode_base64(content: str) -> bytes:
    try:
        return base64.b64decode(content)
    except (binascii.Error, ValueError) as exc:
        raise BaseLockFetchError("💥 Cannot fetch base lock, aborting!") from exc
