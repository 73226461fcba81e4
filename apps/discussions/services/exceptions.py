"""Domain exceptions for discussions app."""

from common.exceptions import (
    ServiceError,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthorizationError,
)


class DiscussionsServiceError(ServiceError):
    """Base exception for all discussions service errors."""
    pass


class DiscussionNotFoundError(DiscussionsServiceError, NotFoundError):
    """Discussion does not exist."""
    default_message = 'Discussion not found'


class CommentNotFoundError(DiscussionsServiceError, NotFoundError):
    """Comment does not exist on this discussion."""
    default_message = 'Comment not found'


class InvalidDiscussionError(DiscussionsServiceError, ValidationError):
    """Required discussion or comment fields are missing."""
    default_message = 'All fields are required'


class InvalidIdentifierError(DiscussionsServiceError, ValidationError):
    """Identifier is not a well-formed UUID."""
    default_message = 'Invalid identifier'


class NotCommentAuthorError(DiscussionsServiceError, AuthorizationError):
    """Only the comment author may delete it."""
    default_message = 'Not authorized to delete this comment'


class SlugUnavailableError(DiscussionsServiceError, ConflictError):
    """No free slug could be claimed after retries."""
    default_message = 'Could not generate a unique slug for this discussion'
