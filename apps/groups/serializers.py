from rest_framework import serializers
from .models import Group, GroupMember


class GroupMemberSerializer(serializers.ModelSerializer):
    """Member entry as exposed by the API."""

    id = serializers.CharField(source='member_id', read_only=True)

    class Meta:
        model = GroupMember
        fields = ['id', 'email', 'name', 'role']
        read_only_fields = fields


class GroupSerializer(serializers.ModelSerializer):
    """Full group view, used by slug lookups and after writes."""

    members = GroupMemberSerializer(many=True, read_only=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = Group
        fields = [
            'id',
            'name',
            'description',
            'category',
            'slug',
            'creator',
            'members',
            'member_count',
            'created_at',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        """Get number of members in the group."""
        return len(obj.members.all())


class GroupListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    members = GroupMemberSerializer(many=True, read_only=True)

    class Meta:
        model = Group
        fields = ['id', 'name', 'description', 'category', 'slug', 'members']
        read_only_fields = fields


class GroupCreateSerializer(serializers.Serializer):
    """
    Request body for creating a group.

    Presence and category checks happen in the service so that every
    client gets the same messages.
    """

    name = serializers.CharField(required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    category = serializers.CharField(required=False, allow_blank=True, default='')


class MembershipSerializer(serializers.Serializer):
    """Request body carrying just an email (leave, membership check)."""

    email = serializers.CharField(required=False, allow_blank=True, default='')


class MembershipStatusSerializer(serializers.Serializer):
    is_member = serializers.BooleanField()
