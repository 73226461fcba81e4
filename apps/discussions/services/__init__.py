"""
Discussions services - Business logic layer.

This package contains all business operations for the discussions app:
- Discussion creation, lookup and deletion
- Discussion and comment likes
- Comment creation, editing and deletion
"""

# Discussion Management
from .discussion_management import (
    create_discussion,
    delete_discussion,
    get_all_discussions,
    get_discussion_by_id,
    get_discussion_by_slug,
    get_discussions_by_group,
)

# Likes and Comments
from .interaction_management import (
    LikeResult,
    toggle_discussion_like,
    get_discussion_likes,
    get_discussion_comments,
    add_comment,
    edit_comment,
    delete_comment,
    toggle_comment_like,
    get_comment_likes,
)

# Domain Exceptions
from .exceptions import (
    DiscussionsServiceError,
    DiscussionNotFoundError,
    CommentNotFoundError,
    InvalidDiscussionError,
    InvalidIdentifierError,
    NotCommentAuthorError,
    SlugUnavailableError,
)

__all__ = [
    # Discussion Management Services
    'create_discussion',
    'delete_discussion',
    'get_all_discussions',
    'get_discussion_by_id',
    'get_discussion_by_slug',
    'get_discussions_by_group',
    # Interaction Services
    'LikeResult',
    'toggle_discussion_like',
    'get_discussion_likes',
    'get_discussion_comments',
    'add_comment',
    'edit_comment',
    'delete_comment',
    'toggle_comment_like',
    'get_comment_likes',
    # Exceptions
    'DiscussionsServiceError',
    'DiscussionNotFoundError',
    'CommentNotFoundError',
    'InvalidDiscussionError',
    'InvalidIdentifierError',
    'NotCommentAuthorError',
    'SlugUnavailableError',
]
