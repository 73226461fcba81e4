"""
Membership management service.

Handles joining, leaving and membership checks. Members are identified
by email throughout.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Max

from apps.groups.models import Group, GroupMember
from common.exceptions import store_errors_converted
from common.identity import Identity, MemberRole, normalize_email

from .exceptions import (
    InvalidGroupError,
    AlreadyMemberError,
    CreatorCannotLeaveError,
)
from .group_management import fetch_group

logger = logging.getLogger(__name__)


@store_errors_converted
@transaction.atomic
def join_group(*, group_id: UUID, identity: Optional[Identity]) -> Group:
    """
    Add the caller to a group's member list.

    Uses row-level locking on the group so two joins cannot both pass
    the membership check; the (group, email) constraint backs this up.

    Args:
        group_id: UUID of the group
        identity: Caller joining the group

    Returns:
        The group, with the new member appended

    Raises:
        InvalidGroupError: If identity lacks id or email
        GroupNotFoundError: If group doesn't exist
        AlreadyMemberError: If a member already uses this email
    """
    if identity is None or not identity.is_complete():
        raise InvalidGroupError("ID and email are required to join the group")

    group = fetch_group(group_id=group_id, for_update=True)
    email = normalize_email(identity.email)

    if group.has_member(email):
        raise AlreadyMemberError()

    last_position = group.members.aggregate(last=Max('position'))['last']

    try:
        with transaction.atomic():
            GroupMember.objects.create(
                group=group,
                member_id=identity.id,
                email=email,
                name=identity.display_name,
                role=MemberRole.USER,
                position=0 if last_position is None else last_position + 1,
            )
    except IntegrityError:
        # Database constraint caught duplicate membership
        raise AlreadyMemberError()

    logger.info("%s joined group '%s'", email, group.name)
    return fetch_group(group_id=group.id)


@store_errors_converted
@transaction.atomic
def leave_group(*, group_id: UUID, email: Optional[str]) -> Group:
    """
    Remove every member entry using ``email`` from a group.

    Leaving a group one is not a member of is a no-op.

    Raises:
        InvalidGroupError: If email is missing
        GroupNotFoundError: If group doesn't exist
        CreatorCannotLeaveError: If email belongs to the group creator
    """
    email = normalize_email(email)
    if not email:
        raise InvalidGroupError("Email is required")

    group = fetch_group(group_id=group_id, for_update=True)

    if normalize_email(group.creator_email) == email:
        raise CreatorCannotLeaveError()

    removed, _ = group.members.filter(email=email).delete()
    if removed:
        logger.info("%s left group '%s'", email, group.name)

    return fetch_group(group_id=group.id)


@store_errors_converted
def check_membership(*, group_id: UUID, email: Optional[str]) -> bool:
    """
    Tell whether ``email`` belongs to a member of the group.

    Raises:
        InvalidGroupError: If email is missing
        GroupNotFoundError: If group doesn't exist
    """
    email = normalize_email(email)
    if not email:
        raise InvalidGroupError("Missing groupId or email")

    group = fetch_group(group_id=group_id)
    return group.has_member(email)


@store_errors_converted
def get_group_members(*, group_id: UUID) -> list[GroupMember]:
    """
    Get the members of a group in join order.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    group = fetch_group(group_id=group_id)
    return list(group.members.all())
