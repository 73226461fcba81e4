from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    GroupSerializer,
    GroupCreateSerializer,
    GroupListSerializer,
    MembershipSerializer,
    MembershipStatusSerializer,
)

from apps.groups.services import (
    create_group,
    delete_group,
    get_all_groups,
    get_group_by_slug,
    join_group,
    leave_group,
    check_membership,
)
from apps.discussions.serializers import DiscussionSerializer
from apps.discussions.services import get_discussions_by_group
from common.identity import resolve_identity


class GroupViewSet(viewsets.ViewSet):
    """
    ViewSet for groups and their membership.

    All business logic is handled by services and service errors are
    rendered by the API exception handler. Views are thin HTTP handlers
    only. The caller's identity is read from the request body.

    list: Get all groups
    create: Create a new group
    destroy: Delete a group and its discussions
    """

    permission_classes = [AllowAny]

    @extend_schema(responses={200: GroupListSerializer(many=True)}, tags=['groups'])
    def list(self, request):
        """Get all groups."""
        serializer = GroupListSerializer(get_all_groups(), many=True)
        return Response(serializer.data)

    @extend_schema(request=GroupCreateSerializer, responses={201: GroupSerializer}, tags=['groups'])
    def create(self, request):
        """Create a new group; the caller becomes creator and first member."""
        serializer = GroupCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = create_group(
            name=serializer.validated_data['name'],
            description=serializer.validated_data['description'],
            category=serializer.validated_data['category'],
            creator=resolve_identity(request.data, required=False, key='creator'),
        )

        output_serializer = GroupSerializer(group)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(tags=['groups'])
    def destroy(self, request, pk=None):
        """Delete a group together with its discussions."""
        deleted = delete_group(group_id=pk)
        return Response({
            'message': 'Group and associated discussions deleted successfully',
            'deleted_discussions': deleted,
        })

    @extend_schema(responses={200: GroupSerializer}, tags=['groups'])
    @action(detail=True, methods=['post'])
    def join(self, request, pk=None):
        """Join a group."""
        group = join_group(
            group_id=pk,
            identity=resolve_identity(request.data, required=False),
        )
        return Response({
            'message': 'Joined group successfully',
            'group': GroupSerializer(group).data,
        })

    @extend_schema(request=MembershipSerializer, responses={200: GroupSerializer}, tags=['groups'])
    @action(detail=True, methods=['post'])
    def leave(self, request, pk=None):
        """Leave a group."""
        serializer = MembershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = leave_group(group_id=pk, email=serializer.validated_data['email'])
        return Response({
            'message': 'Left group successfully',
            'group': GroupSerializer(group).data,
        })

    @extend_schema(
        request=MembershipSerializer,
        responses={200: MembershipStatusSerializer},
        tags=['groups'],
    )
    @action(detail=True, methods=['post'])
    def membership(self, request, pk=None):
        """Check whether an email belongs to a member of the group."""
        serializer = MembershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        is_member = check_membership(group_id=pk, email=serializer.validated_data['email'])
        return Response({'is_member': is_member})

    @extend_schema(responses={200: DiscussionSerializer(many=True)}, tags=['groups'])
    @action(detail=True, methods=['get'])
    def discussions(self, request, pk=None):
        """Get the discussions of a group, newest first."""
        discussions = get_discussions_by_group(group_id=pk)
        serializer = DiscussionSerializer(discussions, many=True)
        return Response(serializer.data)


@extend_schema(
    responses={200: GroupSerializer},
    description="Get a group by its slug, including members and creator.",
    tags=['groups'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def group_by_slug(request, slug):
    """Get a group by slug."""
    group = get_group_by_slug(slug=slug)
    serializer = GroupSerializer(group)
    return Response(serializer.data)
