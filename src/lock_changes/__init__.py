"""package-lock-changes core package.

Diffs two lockfile snapshots and publishes the result as a pull request
comment. The diff and rendering logic lives in ``core`` and ``render`` and has
no GitHub dependencies; ``action`` wires it to the GitHub API.
"""

__all__ = [
    "core",
    "render",
]

__version__ = "1.0.0"
