"""Find-or-create logic for the pull request summary comment."""

from __future__ import annotations

from typing import Any, Protocol

from .log import get_logger
from .render import COMMENT_HEADER

BOT_LOGIN = "github-actions[bot]"

logger = get_logger("comments")


class CommentsAPI(Protocol):
    """The slice of GitHubClient used for publishing."""

    def list_issue_comments(self, number: int) -> list[dict[str, Any]]: ...

    def create_comment(self, number: int, body: str) -> dict[str, Any]: ...

    def update_comment(self, comment_id: int, body: str) -> dict[str, Any]: ...


def _is_own_comment(comment: dict[str, Any], header: str, bot_login: str) -> bool:
    user = comment.get("user") or {}
    body = comment.get("body") or ""
    return user.get("login") == bot_login and body.startswith(header)


def pick_comment_to_update(
    comments: list[dict[str, Any]],
    header: str = COMMENT_HEADER,
    bot_login: str = BOT_LOGIN,
) -> dict[str, Any] | None:
    """Return the latest comment posted by the bot that starts with ``header``."""
    own = [c for c in comments if _is_own_comment(c, header, bot_login)]
    return own[-1] if own else None


def publish_comment(
    client: CommentsAPI,
    issue_number: int,
    body: str,
    update_comment: bool = True,
) -> dict[str, Any]:
    """Replace the previous summary comment, or create a new one.

    With ``update_comment=False`` a new comment is posted every time.
    """
    if update_comment:
        existing = pick_comment_to_update(client.list_issue_comments(issue_number))
        if existing:
            comment = client.update_comment(existing["id"], body)
            logger.info("comment_updated", comment_id=existing["id"], url=comment.get("html_url"))
            return comment

    comment = client.create_comment(issue_number, body)
    logger.info("comment_created", comment_id=comment.get("id"), url=comment.get("html_url"))
    return comment
