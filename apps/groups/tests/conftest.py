import pytest
from rest_framework.test import APIClient
from apps.groups.models import Group, GroupMember, GroupCategory
from apps.discussions.models import Discussion
from common.identity import Identity


@pytest.fixture
def api_client():
    """Return an API client; identity travels in request bodies."""
    return APIClient()


@pytest.fixture
def creator_identity():
    """Identity of the group creator."""
    return Identity(id='u1', email='a@x.com', name='A')


@pytest.fixture
def member_identity():
    """Identity of a user who joins groups."""
    return Identity(id='u2', email='b@x.com', name='B')


@pytest.fixture
def outsider_identity():
    """Identity of a user not in any group."""
    return Identity(id='u3', email='c@x.com', name='Outsider')


@pytest.fixture
def group(db, creator_identity):
    """Create and return a test group with its creator as first member."""
    group = Group.objects.create(
        name='Bikers',
        description='Two wheels, no walls',
        category=GroupCategory.TECHNOLOGY,
        slug='bikers',
        creator=creator_identity.as_member(),
    )
    GroupMember.objects.create(
        group=group,
        member_id=creator_identity.id,
        email=creator_identity.email,
        name=creator_identity.name,
        position=0,
    )
    return group


@pytest.fixture
def group_with_member(group, member_identity):
    """Group with creator and one joined member."""
    GroupMember.objects.create(
        group=group,
        member_id=member_identity.id,
        email=member_identity.email,
        name=member_identity.name,
        position=1,
    )
    return group


@pytest.fixture
def other_group(db, member_identity):
    """A second group created by another user."""
    group = Group.objects.create(
        name='Chess Club',
        description='Openings and endgames',
        category=GroupCategory.GAMING,
        slug='chess-club',
        creator=member_identity.as_member(),
    )
    GroupMember.objects.create(
        group=group,
        member_id=member_identity.id,
        email=member_identity.email,
        name=member_identity.name,
        position=0,
    )
    return group


@pytest.fixture
def group_discussion(group):
    """Create and return a discussion in the test group."""
    return Discussion.objects.create(
        title='Favourite routes',
        content='Share your best rides',
        slug='favourite-routes',
        username='A',
        group=group,
    )
