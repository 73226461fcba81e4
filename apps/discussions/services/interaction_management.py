"""
Interaction service - likes and comments on discussions.

Like toggles lock the row they change for the whole read-modify-write,
so concurrent toggles on the same discussion or comment cannot lose
each other's updates.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from apps.discussions.models import Comment, Discussion
from common.exceptions import store_errors_converted
from common.identity import Identity, normalize_email

from .discussion_management import fetch_discussion
from .exceptions import (
    CommentNotFoundError,
    InvalidDiscussionError,
    NotCommentAuthorError,
)

logger = logging.getLogger(__name__)

LIKED = 'liked'
UNLIKED = 'unliked'


@dataclass(frozen=True)
class LikeResult:
    """Outcome of a like toggle."""

    action: str
    likes: list

    @property
    def liked(self) -> bool:
        return self.action == LIKED


def toggle_like(likes, email: str) -> LikeResult:
    """
    Add ``email`` to ``likes`` or remove it if already there.

    Stored entries are compared after normalisation, so differently
    cased copies of the same email are removed together.
    """
    current = list(likes or [])
    remaining = [liker for liker in current if normalize_email(liker) != email]

    if len(remaining) != len(current):
        return LikeResult(action=UNLIKED, likes=remaining)
    return LikeResult(action=LIKED, likes=current + [email])


def _require_email(email: Optional[str]) -> str:
    email = normalize_email(email)
    if not email:
        raise InvalidDiscussionError("Email is required")
    return email


def _require_content(content) -> str:
    content = str(content).strip() if content is not None else ''
    if not content:
        raise InvalidDiscussionError("Comment content is required")
    return content


def fetch_comment(*, discussion: Discussion, comment_id, for_update: bool = False) -> Comment:
    """
    Load one comment of ``discussion``.

    Raises:
        CommentNotFoundError: If it doesn't exist on this discussion
    """
    queryset = discussion.comments.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=comment_id)
    except (Comment.DoesNotExist, DjangoValidationError, ValueError):
        raise CommentNotFoundError(f"Comment with ID {comment_id} not found")


# =============================================================================
# Discussion likes
# =============================================================================

@store_errors_converted
@transaction.atomic
def toggle_discussion_like(*, discussion_id: UUID, email: Optional[str]) -> LikeResult:
    """
    Like a discussion, or unlike it if ``email`` already likes it.

    Args:
        discussion_id: UUID of the discussion
        email: Email of the caller; stored trimmed and lowercased

    Returns:
        LikeResult with the action taken and the resulting likes

    Raises:
        InvalidDiscussionError: If email is missing
        DiscussionNotFoundError: If discussion doesn't exist
    """
    email = _require_email(email)
    discussion = fetch_discussion(discussion_id=discussion_id, for_update=True)

    result = toggle_like(discussion.likes, email)
    discussion.likes = result.likes
    discussion.save(update_fields=['likes'])

    logger.debug("%s %s discussion %s", email, result.action, discussion_id)
    return result


@store_errors_converted
def get_discussion_likes(*, discussion_id: UUID) -> list:
    """Return the emails liking a discussion."""
    discussion = fetch_discussion(discussion_id=discussion_id)
    return list(discussion.likes or [])


# =============================================================================
# Comments
# =============================================================================

@store_errors_converted
def get_discussion_comments(*, discussion_id: UUID) -> list[Comment]:
    """Return the comments of a discussion, newest first."""
    discussion = fetch_discussion(discussion_id=discussion_id)
    return list(discussion.comments.all())


@store_errors_converted
def add_comment(*, discussion_id: UUID, content: str, author: Optional[Identity]) -> Comment:
    """
    Append a comment to a discussion.

    Raises:
        InvalidDiscussionError: If content is blank or author has no email
        DiscussionNotFoundError: If discussion doesn't exist
    """
    content = _require_content(content)
    if author is None or not author.email:
        raise InvalidDiscussionError("Commenter email is required")

    discussion = fetch_discussion(discussion_id=discussion_id)

    now = timezone.now()
    comment = Comment.objects.create(
        discussion=discussion,
        content=content,
        email=normalize_email(author.email),
        username=author.display_name,
        likes=[],
        created_at=now,
        updated_at=now,
    )

    logger.info("Comment %s added to discussion %s", comment.id, discussion_id)
    return comment


@store_errors_converted
@transaction.atomic
def edit_comment(*, discussion_id: UUID, comment_id: UUID, content: str) -> Comment:
    """
    Replace a comment's content and bump ``updated_at``.

    No authorship check is made here.

    Raises:
        InvalidDiscussionError: If content is blank
        DiscussionNotFoundError: If discussion doesn't exist
        CommentNotFoundError: If comment doesn't exist
    """
    content = _require_content(content)
    discussion = fetch_discussion(discussion_id=discussion_id)
    comment = fetch_comment(discussion=discussion, comment_id=comment_id, for_update=True)

    comment.content = content
    comment.updated_at = timezone.now()
    comment.save(update_fields=['content', 'updated_at'])

    return comment


@store_errors_converted
@transaction.atomic
def delete_comment(*, discussion_id: UUID, comment_id: UUID, requester_email: Optional[str]) -> None:
    """
    Delete a comment on behalf of its author.

    Raises:
        DiscussionNotFoundError: If discussion doesn't exist
        CommentNotFoundError: If comment doesn't exist
        NotCommentAuthorError: If requester_email is not the author's
    """
    discussion = fetch_discussion(discussion_id=discussion_id)
    comment = fetch_comment(discussion=discussion, comment_id=comment_id, for_update=True)

    requester_email = normalize_email(requester_email)
    if not requester_email or normalize_email(comment.email) != requester_email:
        raise NotCommentAuthorError()

    comment.delete()
    logger.info("Comment %s deleted from discussion %s", comment_id, discussion_id)


@store_errors_converted
@transaction.atomic
def toggle_comment_like(*, discussion_id: UUID, comment_id: UUID, email: Optional[str]) -> LikeResult:
    """
    Like a comment, or unlike it if ``email`` already likes it.

    Raises:
        InvalidDiscussionError: If email is missing
        DiscussionNotFoundError: If discussion doesn't exist
        CommentNotFoundError: If comment doesn't exist
    """
    email = _require_email(email)
    discussion = fetch_discussion(discussion_id=discussion_id)
    comment = fetch_comment(discussion=discussion, comment_id=comment_id, for_update=True)

    result = toggle_like(comment.likes, email)
    comment.likes = result.likes
    comment.save(update_fields=['likes'])

    logger.debug("%s %s comment %s", email, result.action, comment_id)
    return result


@store_errors_converted
def get_comment_likes(*, discussion_id: UUID, comment_id: UUID) -> list:
    """Return the emails liking a comment."""
    discussion = fetch_discussion(discussion_id=discussion_id)
    comment = fetch_comment(discussion=discussion, comment_id=comment_id)
    return list(comment.likes or [])
