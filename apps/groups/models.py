# ==========================================
# apps/groups/models.py
# ==========================================

from django.db import models
import uuid

from common.identity import MemberRole


class GroupCategory(models.TextChoices):
    TECHNOLOGY = 'Technology', 'Technology'
    SCIENCE = 'Science', 'Science'
    SPORTS = 'Sports', 'Sports'
    MUSIC = 'Music', 'Music'
    ART = 'Art', 'Art'
    EDUCATION = 'Education', 'Education'
    HEALTH = 'Health', 'Health'
    BUSINESS = 'Business', 'Business'
    GAMING = 'Gaming', 'Gaming'
    TRAVEL = 'Travel', 'Travel'
    LIFESTYLE = 'Lifestyle', 'Lifestyle'
    OTHER = 'Other', 'Other'


class Group(models.Model):
    """Community group that hosts discussions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField()
    category = models.CharField(max_length=50, choices=GroupCategory.choices)
    slug = models.SlugField(max_length=255, unique=True, editable=False)
    # Member snapshot taken at creation; never refreshed
    creator = models.JSONField(default=dict, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'groups'
        indexes = [
            models.Index(fields=['category', 'created_at'], name='groups_category_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def creator_email(self):
        return (self.creator or {}).get('email', '')

    def has_member(self, email):
        return self.members.filter(email=email).exists()


class GroupMember(models.Model):
    """Member entry owned by a group, copied from the caller at join time."""

    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name='members')
    member_id = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    name = models.CharField(max_length=200, blank=True)
    role = models.CharField(max_length=20, choices=MemberRole.choices, default=MemberRole.USER)
    position = models.PositiveIntegerField(default=0)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_members'
        constraints = [
            models.UniqueConstraint(fields=['group', 'email'], name='unique_group_member_email'),
        ]
        indexes = [
            models.Index(fields=['group', 'position'], name='group_members_position_idx'),
        ]
        ordering = ['position', 'joined_at']

    def __str__(self):
        return f"{self.name or self.email} in {self.group.name}"

    def as_dict(self):
        return {
            'id': self.member_id,
            'email': self.email,
            'name': self.name,
            'role': self.role,
        }
