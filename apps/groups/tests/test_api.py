import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.groups.models import Group
from apps.discussions.models import Discussion


def identity_payload(identity):
    return {'id': identity.id, 'email': identity.email, 'name': identity.name}


# =============================================================================
# Group CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupList:
    """Tests for GET /api/groups/"""

    def test_list_groups(self, api_client, group_with_member, other_group):
        """List returns every group with its members."""
        url = reverse('groups:group-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

        bikers = next(g for g in response.data if g['slug'] == 'bikers')
        assert set(bikers) == {'id', 'name', 'description', 'category', 'slug', 'members'}
        assert [m['email'] for m in bikers['members']] == ['a@x.com', 'b@x.com']

    def test_list_groups_empty(self, api_client, db):
        response = api_client.get(reverse('groups:group-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []


@pytest.mark.django_db
class TestGroupCreate:
    """Tests for POST /api/groups/"""

    def test_create_group(self, api_client, db):
        """Create a new group; the caller becomes creator and member."""
        url = reverse('groups:group-list')
        data = {
            'name': 'Bikers',
            'description': 'd',
            'category': 'Technology',
            'creator': {'id': 'u1', 'email': 'a@x.com', 'name': 'A'},
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['slug'] == 'bikers'
        assert response.data['member_count'] == 1
        assert response.data['creator']['email'] == 'a@x.com'
        assert Group.objects.filter(name='Bikers').exists()

    def test_create_group_with_nested_user_info(self, api_client, db):
        """Identity may be nested under userInfo.user."""
        url = reverse('groups:group-list')
        data = {
            'name': 'Painters',
            'description': 'Oil and acrylic',
            'category': 'Art',
            'userInfo': {'user': {'id': 42, 'email': 'P@X.com', 'name': 'Pat'}},
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['creator'] == {'id': '42', 'email': 'p@x.com', 'name': 'Pat', 'role': 'user'}

    def test_create_group_missing_fields(self, api_client, db):
        url = reverse('groups:group-list')
        data = {'name': 'Bikers', 'creator': {'id': 'u1', 'email': 'a@x.com'}}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'All fields are required'

    def test_create_group_duplicate_name(self, api_client, group):
        url = reverse('groups:group-list')
        data = {
            'name': 'Bikers',
            'description': 'again',
            'category': 'Sports',
            'creator': {'id': 'u2', 'email': 'b@x.com'},
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Group with this name already exists'

    def test_create_group_malformed_email(self, api_client, db):
        url = reverse('groups:group-list')
        data = {
            'name': 'Bikers',
            'description': 'd',
            'category': 'Technology',
            'creator': {'id': 'u1', 'email': 'not-an-email'},
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data['error']


@pytest.mark.django_db
class TestGroupBySlug:
    """Tests for GET /api/groups/by-slug/{slug}/"""

    def test_get_group_by_slug(self, api_client, group_with_member):
        url = reverse('groups:group-by-slug', args=['bikers'])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(group_with_member.id)
        assert response.data['member_count'] == 2
        assert response.data['creator']['email'] == 'a@x.com'
        assert response.data['members'][1] == {'id': 'u2', 'email': 'b@x.com', 'name': 'B', 'role': 'user'}

    def test_get_group_by_slug_not_found(self, api_client, db):
        url = reverse('groups:group-by-slug', args=['missing'])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == "Group 'missing' not found"


@pytest.mark.django_db
class TestGroupDelete:
    """Tests for DELETE /api/groups/{id}/"""

    def test_delete_group_cascades(self, api_client, group, group_discussion):
        url = reverse('groups:group-detail', args=[group.id])
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['deleted_discussions'] == 1
        assert not Group.objects.filter(id=group.id).exists()
        assert not Discussion.objects.filter(id=group_discussion.id).exists()

    def test_delete_group_not_found(self, api_client, db):
        url = reverse('groups:group-detail', args=[uuid4()])
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Membership Tests
# =============================================================================

@pytest.mark.django_db
class TestJoinGroup:
    """Tests for POST /api/groups/{id}/join/"""

    def test_join_group(self, api_client, group, member_identity):
        url = reverse('groups:group-join', args=[group.id])
        response = api_client.post(url, identity_payload(member_identity), format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Joined group successfully'
        assert response.data['group']['member_count'] == 2

    def test_join_group_twice(self, api_client, group_with_member, member_identity):
        url = reverse('groups:group-join', args=[group_with_member.id])
        response = api_client.post(url, identity_payload(member_identity), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'User is already a member of this group'

    def test_join_group_non_object_body(self, api_client, group):
        url = reverse('groups:group-join', args=[group.id])
        response = api_client.post(url, [1, 2], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid request body'
        assert len(group.members.all()) == 1

    def test_join_group_missing_identity(self, api_client, group):
        url = reverse('groups:group-join', args=[group.id])
        response = api_client.post(url, {'name': 'Nobody'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_join_group_not_found(self, api_client, db, member_identity):
        url = reverse('groups:group-join', args=[uuid4()])
        response = api_client.post(url, identity_payload(member_identity), format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data


@pytest.mark.django_db
class TestLeaveGroup:
    """Tests for POST /api/groups/{id}/leave/"""

    def test_leave_group(self, api_client, group_with_member):
        url = reverse('groups:group-leave', args=[group_with_member.id])
        response = api_client.post(url, {'email': 'b@x.com'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['group']['member_count'] == 1

    def test_creator_cannot_leave(self, api_client, group_with_member):
        url = reverse('groups:group-leave', args=[group_with_member.id])
        response = api_client.post(url, {'email': 'a@x.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Group creator cannot leave the group'


@pytest.mark.django_db
class TestMembershipCheck:
    """Tests for POST /api/groups/{id}/membership/"""

    def test_member(self, api_client, group_with_member):
        url = reverse('groups:group-membership', args=[group_with_member.id])
        response = api_client.post(url, {'email': 'b@x.com'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'is_member': True}

    def test_non_member(self, api_client, group):
        url = reverse('groups:group-membership', args=[group.id])
        response = api_client.post(url, {'email': 'z@x.com'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'is_member': False}

    def test_missing_email(self, api_client, group):
        url = reverse('groups:group-membership', args=[group.id])
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestGroupDiscussions:
    """Tests for GET /api/groups/{id}/discussions/"""

    def test_list_group_discussions(self, api_client, group, group_discussion):
        url = reverse('groups:group-discussions', args=[group.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['slug'] == 'favourite-routes'
        assert response.data[0]['group']['name'] == 'Bikers'

    def test_group_without_discussions_is_empty(self, api_client, group):
        url = reverse('groups:group-discussions', args=[group.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_malformed_group_id(self, api_client, db):
        url = reverse('groups:group-discussions', args=['not-a-uuid'])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid groupId'

    def test_missing_group(self, api_client, db):
        url = reverse('groups:group-discussions', args=[uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
