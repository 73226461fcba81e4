from rest_framework import serializers
from .models import Discussion, Comment
from apps.groups.models import Group


class GroupSummarySerializer(serializers.ModelSerializer):
    """Group fields embedded in discussion payloads."""

    class Meta:
        model = Group
        fields = ['id', 'name', 'description', 'category', 'slug', 'created_at']
        read_only_fields = fields


class CommentSerializer(serializers.ModelSerializer):
    """Serializer for comments."""

    class Meta:
        model = Comment
        fields = [
            'id',
            'content',
            'email',
            'username',
            'likes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DiscussionSerializer(serializers.ModelSerializer):
    """Main serializer for discussions; comments are listed newest first."""

    group = GroupSummarySerializer(read_only=True)
    comments = CommentSerializer(many=True, read_only=True)
    like_count = serializers.SerializerMethodField()

    class Meta:
        model = Discussion
        fields = [
            'id',
            'title',
            'content',
            'category',
            'slug',
            'username',
            'group',
            'likes',
            'like_count',
            'comments',
            'created_at',
        ]
        read_only_fields = fields

    def get_like_count(self, obj):
        return len(obj.likes or [])


class DiscussionCreateSerializer(serializers.Serializer):
    """Request body for posting a discussion; the poster comes from identity fields."""

    title = serializers.CharField(required=False, allow_blank=True, default='')
    content = serializers.CharField(required=False, allow_blank=True, default='')
    group_id = serializers.CharField(required=False, allow_blank=True, default='')
    category = serializers.CharField(required=False, allow_blank=True, default='')


class CommentContentSerializer(serializers.Serializer):
    """Request body for adding or editing a comment."""

    content = serializers.CharField(required=False, allow_blank=True, default='')


class EmailSerializer(serializers.Serializer):
    """Request body carrying the caller's email (likes, comment delete)."""

    email = serializers.CharField(required=False, allow_blank=True, default='')


class LikeResultSerializer(serializers.Serializer):
    message = serializers.CharField()
    action = serializers.CharField()
    likes = serializers.ListField(child=serializers.CharField())


class CommentListSerializer(serializers.Serializer):
    comments = CommentSerializer(many=True)
    comment_count = serializers.IntegerField()
