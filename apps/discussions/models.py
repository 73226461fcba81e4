# ==========================================
# apps/discussions/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class Discussion(models.Model):
    """Thread posted inside a group."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    content = models.TextField()
    category = models.CharField(max_length=50, blank=True)
    slug = models.SlugField(max_length=255, unique=True, editable=False)
    # Display name of the poster, not a reference
    username = models.CharField(max_length=200)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='discussions')
    # Emails of likers; each appears at most once
    likes = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'discussions'
        indexes = [
            models.Index(fields=['group', 'created_at'], name='discussions_group_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Comment(models.Model):
    """Comment owned by a discussion; removed with it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    discussion = models.ForeignKey(Discussion, on_delete=models.CASCADE, related_name='comments')
    content = models.TextField()
    email = models.EmailField(max_length=255)
    username = models.CharField(max_length=200, blank=True)
    likes = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    # Only edits move this forward; likes do not
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'discussion_comments'
        indexes = [
            models.Index(fields=['discussion', 'created_at'], name='comments_disc_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.username or self.email} on {self.discussion.title}"
