"""GitHub Action entrypoint.

Runs the pipeline sequentially: read the local lockfile, fetch the base branch
lockfile, diff, render, then update or create the pull request comment. The
first error aborts the run and is reported as a failed step.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .comments import publish_comment
from .config import load_inputs
from .core import diff_locks, parse_lock
from .errors import LockfileNotFoundError, LockfileParseError
from .github import GitHubClient, PullRequestContext
from .log import get_logger, level_from_env, setup_logging
from .render import render_comment

logger = get_logger("action")


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Emit the ``::error::`` workflow command for ``message``."""
    print(f"::error::{_escape_data(message)}", flush=True)


def _decode(content: bytes, label: str) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LockfileParseError(f"💥 {label} lockfile is not valid UTF-8, aborting!") from exc


def _write_step_summary(body: str, environ: Mapping[str, str]) -> None:
    summary_file = environ.get("GITHUB_STEP_SUMMARY", "")
    if summary_file:
        with open(summary_file, "a", encoding="utf-8") as f:
            f.write(body + "\n")


def run(
    environ: Mapping[str, str] = os.environ,
    client: GitHubClient | None = None,
) -> dict[str, Any] | None:
    """Publish the lock changes comment; return it, or None when nothing changed."""
    inputs = load_inputs(environ)
    logger.debug("inputs_loaded", inputs=repr(inputs))

    context = PullRequestContext.from_env(environ)

    workspace = Path(environ.get("GITHUB_WORKSPACE") or os.getcwd())
    lock_path = (workspace / inputs.path).resolve()
    if not lock_path.is_file():
        raise LockfileNotFoundError("💥 It looks like lock does not exist in this PR, aborting!")

    current = parse_lock(_decode(lock_path.read_bytes(), "Local"), inputs.path)

    client = client or GitHubClient.for_context(inputs.token, context)
    base_content = client.fetch_file(inputs.path, ref=context.base_ref)
    logger.info(
        "base_lock_fetched",
        path=inputs.path,
        ref=context.base_ref or "default branch",
        size=len(base_content),
    )
    previous = parse_lock(_decode(base_content, "Base"), inputs.path)

    changes = diff_locks(previous, current)
    if not changes:
        logger.info("no_lock_changes", path=inputs.path)
        return None

    logger.info("lock_changes_found", count=len(changes))
    body = render_comment(changes, inputs.collapsible_threshold)

    comment = publish_comment(client, context.number, body, inputs.update_comment)
    _write_step_summary(body, environ)
    return comment


def main(environ: Mapping[str, str] = os.environ) -> int:
    setup_logging(level_from_env(environ))
    try:
        run(environ)
    except Exception as exc:
        # Any failure fails the step with its message, as core.setFailed does.
        logger.error("run_failed", error_type=type(exc).__name__, error=str(exc))
        set_failed(str(exc))
        return 1
    return 0
