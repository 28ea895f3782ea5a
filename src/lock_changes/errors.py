"""Error types raised while computing or publishing lock changes."""

from __future__ import annotations


class LockChangesError(RuntimeError):
    """Base error; any subclass aborts the run."""


class ConfigError(LockChangesError):
    """Raised when an action input is missing or cannot be interpreted."""


class PullRequestContextError(LockChangesError):
    """Raised when the workflow was not triggered for a pull request."""


class LockfileNotFoundError(LockChangesError):
    """Raised when the lockfile is missing from the pull request branch."""


class LockfileParseError(LockChangesError):
    """Raised when lockfile text cannot be parsed."""


class BaseLockFetchError(LockChangesError):
    """Raised when the base branch lockfile cannot be fetched."""


class CommentListError(LockChangesError):
    """Raised when pull request comments cannot be listed."""
