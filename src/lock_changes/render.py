"""Markdown rendering for the lock changes pull request comment."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .core import count_statuses
from .models import STATUS_ORDER, Change

GH_RAW_URL = "https://raw.githubusercontent.com"
ASSETS_URL = f"{GH_RAW_URL}/Mheaus/package-lock-changes/main/assets"
COMMENT_HEADER = "## `package-lock.json` changes"

DEFAULT_COLLAPSIBLE_THRESHOLD = 25

_ALIGN_DELIMITERS = {"l": ":-", "c": ":-:", "r": "-:"}


def status_label(status: str) -> str:
    """Return the badge image shown for a change status."""
    return (
        f'[<sub><img alt="{status.upper()}" src="{ASSETS_URL}/{status}.svg" '
        f'height="16" /></sub>](#)'
    )


def markdown_table(rows: Sequence[Sequence[object]], align: Sequence[str]) -> str:
    """Render ``rows`` (header first) as a GitHub markdown table.

    ``align`` holds one of ``l``, ``c`` or ``r`` per column.
    """
    header, *body = rows
    lines = [
        _table_row(header),
        _table_row(_ALIGN_DELIMITERS[a] for a in align),
    ]
    lines.extend(_table_row(row) for row in body)
    return "\n".join(lines)


def _table_row(cells) -> str:
    return "| " + " | ".join(str(cell) for cell in cells) + " |"


def render_table(changes: Mapping[str, Change]) -> str:
    """Render every change as a row, sorted by package name."""
    rows = [
        [f"`{name}`", status_label(change.status), change.previous, change.current]
        for name, change in sorted(changes.items())
    ]
    return markdown_table(
        [["Name", "Status", "Previous", "Current"], *rows],
        align=["l", "c", "c", "c"],
    )


def render_summary(changes: Mapping[str, Change]) -> str:
    """Render the per-status counts, skipping statuses that did not occur."""
    counts = count_statuses(changes)
    rows = [
        [status_label(status), counts[status]] for status in STATUS_ORDER if counts.get(status)
    ]
    return markdown_table([["Status", "Count"], *rows], align=["l", "c"])


def is_collapsed(changes: Mapping[str, Change], collapsible_threshold: int) -> bool:
    return len(changes) >= collapsible_threshold


def render_comment(
    changes: Mapping[str, Change],
    collapsible_threshold: int = DEFAULT_COLLAPSIBLE_THRESHOLD,
) -> str:
    """Return the full comment body.

    Large diffs are collapsed and preceded by a summary table.
    """
    collapsed = is_collapsed(changes, collapsible_threshold)
    summary = f"### Summary\n{render_summary(changes)}" if collapsed else ""
    table = render_table(changes)

    return (
        f"{COMMENT_HEADER}\n{summary}\n"
        f"<details{'' if collapsed else ' open'}>\n"
        f"<summary>Click to toggle table visibility</summary>\n<br/>\n\n{table}\n\n"
        "</details>"
    )
