"""
Groups app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and row locking.
"""

from .exceptions import (
    GroupsServiceError,
    GroupNotFoundError,
    InvalidGroupError,
    DuplicateGroupNameError,
    AlreadyMemberError,
    CreatorCannotLeaveError,
    SlugUnavailableError,
)

from .group_management import (
    create_group,
    delete_group,
    get_all_groups,
    get_group_by_id,
    get_group_by_slug,
)

from .membership_management import (
    join_group,
    leave_group,
    check_membership,
    get_group_members,
)


__all__ = [
    # Exceptions
    'GroupsServiceError',
    'GroupNotFoundError',
    'InvalidGroupError',
    'DuplicateGroupNameError',
    'AlreadyMemberError',
    'CreatorCannotLeaveError',
    'SlugUnavailableError',

    # Group Management
    'create_group',
    'delete_group',
    'get_all_groups',
    'get_group_by_id',
    'get_group_by_slug',

    # Membership Management
    'join_group',
    'leave_group',
    'check_membership',
    'get_group_members',
]
