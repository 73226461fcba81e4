"""
Domain-specific exceptions for groups app.

Each exception extends one of the shared error kinds in
``common.exceptions`` so the API exception handler can pick the status
code without views having to catch anything.
"""

from common.exceptions import (
    ServiceError,
    ValidationError,
    NotFoundError,
    ConflictError,
)


class GroupsServiceError(ServiceError):
    """Base exception for all groups service errors."""
    pass


class GroupNotFoundError(GroupsServiceError, NotFoundError):
    """Raised when a group does not exist."""
    default_message = 'Group not found'


class InvalidGroupError(GroupsServiceError, ValidationError):
    """Raised when group fields are missing or invalid."""
    default_message = 'All fields are required'


class DuplicateGroupNameError(GroupsServiceError, ConflictError):
    """Raised when another group already uses the requested name."""
    default_message = 'Group with this name already exists'


class AlreadyMemberError(GroupsServiceError, ConflictError):
    """Raised when a member with the same email is already in the group."""
    default_message = 'User is already a member of this group'


class CreatorCannotLeaveError(GroupsServiceError, ValidationError):
    """Raised when the group creator tries to leave their group."""
    default_message = 'Group creator cannot leave the group'


class SlugUnavailableError(GroupsServiceError, ConflictError):
    """Raised when no free slug could be claimed after retries."""
    default_message = 'Could not generate a unique slug for this group'
