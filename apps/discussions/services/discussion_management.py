"""Discussion management service - create, look up and delete discussions."""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.discussions.models import Discussion
from apps.groups.services.group_management import fetch_group
from common.exceptions import store_errors_converted
from common.identity import Identity
from common.slugs import unique_slug

from .exceptions import (
    DiscussionNotFoundError,
    InvalidDiscussionError,
    InvalidIdentifierError,
    SlugUnavailableError,
)

logger = logging.getLogger(__name__)


def _clean(value) -> str:
    return str(value).strip() if value is not None else ''


def _discussion_queryset() -> QuerySet[Discussion]:
    return Discussion.objects.select_related('group').prefetch_related('comments')


def fetch_discussion(*, discussion_id, for_update: bool = False) -> Discussion:
    """
    Load a discussion by primary key.

    Raises:
        DiscussionNotFoundError: If it doesn't exist or the id is malformed
    """
    queryset = Discussion.objects.select_for_update() if for_update else _discussion_queryset()
    try:
        return queryset.get(id=discussion_id)
    except (Discussion.DoesNotExist, DjangoValidationError, ValueError):
        raise DiscussionNotFoundError(f"Discussion with ID {discussion_id} not found")


@store_errors_converted
def create_discussion(
    *,
    title: str,
    content: str,
    poster: Optional[Identity],
    group_id: Optional[UUID],
    category: Optional[str] = None,
    max_retries: int = 5
) -> Discussion:
    """
    Post a new discussion in a group.

    The slug comes from the title; when it is taken, ``-1``, ``-2`` and so
    on are appended, so a repeated title never makes creation fail.

    Args:
        title: Discussion title
        content: Body text
        poster: Identity of the caller; its name becomes ``username``
        group_id: UUID of the group the discussion belongs to
        category: Optional free-form category
        max_retries: Attempts to claim a slug before giving up

    Returns:
        Created Discussion instance

    Raises:
        InvalidDiscussionError: If title, content, poster or group_id is missing,
            or title or category is too long
        GroupNotFoundError: If the group doesn't exist
        SlugUnavailableError: If no slug could be claimed after retries
    """
    title = _clean(title)
    content = _clean(content)

    if (
        not title
        or not content
        or not group_id
        or poster is None
        or not poster.email
        or not poster.name
    ):
        raise InvalidDiscussionError("All fields are required")

    max_title_length = Discussion._meta.get_field('title').max_length
    if len(title) > max_title_length:
        raise InvalidDiscussionError(f"Title must be at most {max_title_length} characters")

    category = _clean(category)
    max_category_length = Discussion._meta.get_field('category').max_length
    if len(category) > max_category_length:
        raise InvalidDiscussionError(f"Category must be at most {max_category_length} characters")

    group = fetch_group(group_id=group_id)

    for attempt in range(max_retries):
        slug = unique_slug(Discussion, title, fallback='discussion')

        try:
            with transaction.atomic():
                discussion = Discussion.objects.create(
                    title=title,
                    content=content,
                    category=category,
                    slug=slug,
                    username=poster.name,
                    group=group,
                    likes=[],
                )
        except IntegrityError:
            logger.warning("Slug '%s' was claimed concurrently (attempt %d)", slug, attempt + 1)
            continue

        logger.info("Discussion '%s' created in group '%s' by %s", discussion.slug, group.name, poster.email)
        return discussion

    raise SlugUnavailableError(
        f"Failed to generate unique slug after {max_retries} attempts"
    )


@store_errors_converted
def get_discussion_by_id(*, discussion_id: UUID) -> Discussion:
    """Get a discussion by ID with its group loaded."""
    return fetch_discussion(discussion_id=discussion_id)


@store_errors_converted
def get_discussion_by_slug(*, slug: str) -> Discussion:
    """
    Get a discussion by slug with its group and comments loaded.

    Comments come back newest first.

    Raises:
        DiscussionNotFoundError: If no discussion has this slug
    """
    try:
        return _discussion_queryset().get(slug=slug)
    except Discussion.DoesNotExist:
        raise DiscussionNotFoundError(f"Discussion '{slug}' not found")


@store_errors_converted
def get_all_discussions() -> list[Discussion]:
    """Return every discussion, newest first."""
    return list(_discussion_queryset().order_by('-created_at'))


@store_errors_converted
def get_discussions_by_group(*, group_id) -> list[Discussion]:
    """
    Get the discussions of one group, newest first.

    A group without discussions yields an empty list.

    Raises:
        InvalidIdentifierError: If group_id is not a UUID
        GroupNotFoundError: If the group doesn't exist
    """
    try:
        group_uuid = UUID(str(group_id))
    except ValueError:
        raise InvalidIdentifierError("Invalid groupId")

    group = fetch_group(group_id=group_uuid)

    return list(
        _discussion_queryset()
        .filter(group=group)
        .order_by('-created_at')
    )


@store_errors_converted
@transaction.atomic
def delete_discussion(*, discussion_id: UUID) -> None:
    """
    Delete a discussion and its comments.

    Any caller may delete; there is no ownership check.

    Raises:
        DiscussionNotFoundError: If it doesn't exist
    """
    discussion = fetch_discussion(discussion_id=discussion_id, for_update=True)
    discussion.delete()

    logger.info("Discussion %s deleted", discussion_id)
