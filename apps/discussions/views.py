from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    DiscussionSerializer,
    DiscussionCreateSerializer,
    CommentSerializer,
    CommentContentSerializer,
    CommentListSerializer,
    EmailSerializer,
    LikeResultSerializer,
)
from apps.discussions.services import (
    create_discussion,
    delete_discussion,
    get_all_discussions,
    get_discussion_by_slug,
    toggle_discussion_like,
    get_discussion_likes,
    get_discussion_comments,
    add_comment,
    edit_comment,
    delete_comment,
    toggle_comment_like,
    get_comment_likes,
)
from common.identity import resolve_identity

COMMENT_PATH = r'comments/(?P<comment_id>[^/.]+)'


def _like_response(result, subject):
    message = 'Liked' if result.liked else 'Unliked'
    if subject:
        message = f"{message} {subject}"
    return Response({
        'message': message,
        'action': result.action,
        'likes': result.likes,
    })


class DiscussionViewSet(viewsets.ViewSet):
    """
    ViewSet for discussions, their comments and likes.

    list: Get all discussions
    create: Post a discussion in a group
    destroy: Delete a discussion (no ownership check)
    """

    permission_classes = [AllowAny]

    @extend_schema(responses={200: DiscussionSerializer(many=True)}, tags=['discussions'])
    def list(self, request):
        """Get all discussions, newest first."""
        serializer = DiscussionSerializer(get_all_discussions(), many=True)
        return Response(serializer.data)

    @extend_schema(request=DiscussionCreateSerializer, responses={201: DiscussionSerializer}, tags=['discussions'])
    def create(self, request):
        """Post a new discussion; the poster's name becomes its username."""
        serializer = DiscussionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        discussion = create_discussion(
            title=serializer.validated_data['title'],
            content=serializer.validated_data['content'],
            poster=resolve_identity(request.data, required=False),
            group_id=serializer.validated_data['group_id'],
            category=serializer.validated_data['category'],
        )

        output_serializer = DiscussionSerializer(discussion)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(tags=['discussions'])
    def destroy(self, request, pk=None):
        """Delete a discussion."""
        delete_discussion(discussion_id=pk)
        return Response({'message': 'Discussion deleted successfully'})

    # -------------------------------------------------------------------------
    # Likes
    # -------------------------------------------------------------------------

    @extend_schema(request=EmailSerializer, responses={200: LikeResultSerializer}, tags=['discussions'])
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        """Like or unlike a discussion."""
        serializer = EmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = toggle_discussion_like(discussion_id=pk, email=serializer.validated_data['email'])
        return _like_response(result, subject='')

    @extend_schema(tags=['discussions'])
    @action(detail=True, methods=['get'])
    def likes(self, request, pk=None):
        """Get the emails liking a discussion."""
        return Response(get_discussion_likes(discussion_id=pk))

    # -------------------------------------------------------------------------
    # Comments
    # -------------------------------------------------------------------------

    @extend_schema(
        request=CommentContentSerializer,
        responses={200: CommentListSerializer, 201: CommentSerializer},
        tags=['comments'],
    )
    @action(detail=True, methods=['get', 'post'])
    def comments(self, request, pk=None):
        """List a discussion's comments, or add one."""
        if request.method == 'GET':
            comments = get_discussion_comments(discussion_id=pk)
            return Response({
                'comments': CommentSerializer(comments, many=True).data,
                'comment_count': len(comments),
            })

        serializer = CommentContentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = add_comment(
            discussion_id=pk,
            content=serializer.validated_data['content'],
            author=resolve_identity(request.data, required=False),
        )
        return Response(
            {'message': 'Comment added successfully', 'comment': CommentSerializer(comment).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=CommentContentSerializer, responses={200: CommentSerializer}, tags=['comments'])
    @action(detail=True, methods=['put', 'delete'], url_path=COMMENT_PATH, url_name='comment-detail')
    def comment_detail(self, request, pk=None, comment_id=None):
        """Edit a comment, or delete it as its author."""
        if request.method == 'DELETE':
            serializer = EmailSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            delete_comment(
                discussion_id=pk,
                comment_id=comment_id,
                requester_email=serializer.validated_data['email'],
            )
            return Response({'message': 'Comment deleted successfully'})

        serializer = CommentContentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = edit_comment(
            discussion_id=pk,
            comment_id=comment_id,
            content=serializer.validated_data['content'],
        )
        return Response({
            'message': 'Comment updated successfully',
            'comment': CommentSerializer(comment).data,
        })

    @extend_schema(request=EmailSerializer, responses={200: LikeResultSerializer}, tags=['comments'])
    @action(detail=True, methods=['post'], url_path=f'{COMMENT_PATH}/like', url_name='comment-like')
    def comment_like(self, request, pk=None, comment_id=None):
        """Like or unlike a comment."""
        serializer = EmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = toggle_comment_like(
            discussion_id=pk,
            comment_id=comment_id,
            email=serializer.validated_data['email'],
        )
        return _like_response(result, subject='comment')

    @extend_schema(tags=['comments'])
    @action(detail=True, methods=['get'], url_path=f'{COMMENT_PATH}/likes', url_name='comment-likes')
    def comment_likes(self, request, pk=None, comment_id=None):
        """Get the emails liking a comment."""
        return Response(get_comment_likes(discussion_id=pk, comment_id=comment_id))


@extend_schema(
    responses={200: DiscussionSerializer},
    description="Get a discussion by slug with its group summary and comments.",
    tags=['discussions'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def discussion_by_slug(request, slug):
    """
    Get a discussion by slug.

    Likes are stored and returned as the likers' normalized emails, which
    serve as their display identities; no separate username is kept.
    """
    discussion = get_discussion_by_slug(slug=slug)
    serializer = DiscussionSerializer(discussion)
    return Response(serializer.data)
