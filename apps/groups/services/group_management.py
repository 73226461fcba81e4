"""
Group management service.

Handles group creation, lookup and deletion with transaction safety.
"""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.discussions.models import Discussion
from apps.groups.models import Group, GroupCategory, GroupMember
from common.exceptions import store_errors_converted
from common.identity import Identity
from common.slugs import unique_slug

from .exceptions import (
    GroupNotFoundError,
    InvalidGroupError,
    DuplicateGroupNameError,
    SlugUnavailableError,
)

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    return str(value).strip() if value is not None else ''


def _group_queryset() -> QuerySet[Group]:
    return Group.objects.prefetch_related('members')


def fetch_group(*, group_id, for_update: bool = False) -> Group:
    """
    Load a group by primary key.

    Malformed identifiers are reported the same way as missing groups.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    queryset = Group.objects.select_for_update() if for_update else _group_queryset()
    try:
        return queryset.get(id=group_id)
    except (Group.DoesNotExist, DjangoValidationError, ValueError):
        raise GroupNotFoundError(f"Group with ID {group_id} not found")


@store_errors_converted
def create_group(
    *,
    name: str,
    description: str,
    category: str,
    creator: Optional[Identity],
    max_retries: int = 5
) -> Group:
    """
    Create a new group with its creator as the first member.

    This is a multi-step operation wrapped in a transaction:
    1. Generate a free slug from the name
    2. Create the group with a snapshot of the creator
    3. Create the creator's member entry at position 0

    Args:
        name: Group name (must not be used by another group)
        description: Group description
        category: One of ``GroupCategory``
        creator: Identity of the caller creating the group
        max_retries: Attempts to claim a slug before giving up

    Returns:
        Created Group instance

    Raises:
        InvalidGroupError: If a field is missing, name is too long or category is unknown
        DuplicateGroupNameError: If a group with this name exists
        SlugUnavailableError: If no slug could be claimed after retries
    """
    name = _clean(name)
    description = _clean(description)
    category = _clean(category)

    if not name or not description or not category:
        raise InvalidGroupError("All fields are required")

    max_name_length = Group._meta.get_field('name').max_length
    if len(name) > max_name_length:
        raise InvalidGroupError(f"Group name must be at most {max_name_length} characters")

    if category not in GroupCategory.values:
        raise InvalidGroupError(
            f"Invalid category '{category}'. Choose one of: {', '.join(GroupCategory.values)}"
        )

    if creator is None or not creator.is_complete():
        raise InvalidGroupError("Creator ID and email are required")

    # Advisory only: the name column is not unique
    if Group.objects.filter(name=name).exists():
        raise DuplicateGroupNameError()

    snapshot = creator.as_member()
    snapshot['name'] = creator.display_name

    # Retry logic outside transaction to handle slug races
    for attempt in range(max_retries):
        slug = unique_slug(Group, name, fallback='group')

        try:
            with transaction.atomic():
                group = Group.objects.create(
                    name=name,
                    description=description,
                    category=category,
                    slug=slug,
                    creator=snapshot,
                )

                GroupMember.objects.create(
                    group=group,
                    member_id=creator.id,
                    email=creator.email,
                    name=snapshot['name'],
                    role=snapshot['role'],
                    position=0,
                )
        except IntegrityError:
            logger.warning("Slug '%s' was claimed concurrently (attempt %d)", slug, attempt + 1)
            continue

        logger.info("Group '%s' created with slug '%s' by %s", group.name, group.slug, creator.email)
        return group

    raise SlugUnavailableError(
        f"Failed to generate unique slug after {max_retries} attempts"
    )


@store_errors_converted
def get_group_by_id(*, group_id: UUID) -> Group:
    """
    Get a group by ID with its members prefetched.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    return fetch_group(group_id=group_id)


@store_errors_converted
def get_group_by_slug(*, slug: str) -> Group:
    """
    Get a group by its slug with members prefetched.

    Raises:
        GroupNotFoundError: If no group has this slug
    """
    try:
        return _group_queryset().get(slug=slug)
    except Group.DoesNotExist:
        raise GroupNotFoundError(f"Group '{slug}' not found")


@store_errors_converted
def get_all_groups() -> list[Group]:
    """Return every group, newest first, with members prefetched."""
    return list(_group_queryset().all())


@store_errors_converted
@transaction.atomic
def delete_group(*, group_id: UUID) -> int:
    """
    Delete a group together with every discussion posted in it.

    Both deletions run in one transaction, so callers never observe
    discussions orphaned by a half-finished delete.

    Args:
        group_id: UUID of the group

    Returns:
        Number of discussions removed with the group

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    group = fetch_group(group_id=group_id, for_update=True)

    discussion_count = Discussion.objects.filter(group=group).count()
    Discussion.objects.filter(group=group).delete()
    group.delete()

    logger.info("Group %s deleted along with %d discussions", group_id, discussion_count)
    return discussion_count
