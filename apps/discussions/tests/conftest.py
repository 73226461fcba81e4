import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from apps.groups.models import Group, GroupMember, GroupCategory
from apps.discussions.models import Discussion, Comment
from common.identity import Identity


@pytest.fixture
def api_client():
    """Return an API client; identity travels in request bodies."""
    return APIClient()


@pytest.fixture
def poster_identity():
    """Identity of the user posting discussions."""
    return Identity(id='u1', email='poster@example.com', name='Poster')


@pytest.fixture
def commenter_identity():
    """Identity of the user writing comments."""
    return Identity(id='u2', email='commenter@example.com', name='Commenter')


@pytest.fixture
def discussion_group(db, poster_identity):
    """Create and return a group to post discussions in."""
    group = Group.objects.create(
        name='Book Club',
        description='One chapter a week',
        category=GroupCategory.EDUCATION,
        slug='book-club',
        creator=poster_identity.as_member(),
    )
    GroupMember.objects.create(
        group=group,
        member_id=poster_identity.id,
        email=poster_identity.email,
        name=poster_identity.name,
        position=0,
    )
    return group


@pytest.fixture
def discussion(discussion_group):
    """Create and return a discussion without likes or comments."""
    return Discussion.objects.create(
        title='Hello World',
        content='First post',
        slug='hello-world',
        username='Poster',
        group=discussion_group,
    )


@pytest.fixture
def comment(discussion, commenter_identity):
    """Create and return a comment written an hour ago."""
    created = timezone.now() - timedelta(hours=1)
    return Comment.objects.create(
        discussion=discussion,
        content='Nice post',
        email=commenter_identity.email,
        username=commenter_identity.name,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def newer_comment(discussion, poster_identity):
    """Create and return a comment written a minute ago."""
    created = timezone.now() - timedelta(minutes=1)
    return Comment.objects.create(
        discussion=discussion,
        content='Thanks!',
        email=poster_identity.email,
        username=poster_identity.name,
        created_at=created,
        updated_at=created,
    )
