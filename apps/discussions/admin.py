# ==========================================
# apps/discussions/admin.py
# ==========================================

from django.contrib import admin
from apps.discussions.models import Discussion, Comment


class CommentInline(admin.TabularInline):
    """Inline admin for discussion comments."""
    model = Comment
    extra = 0
    fields = ['username', 'email', 'content', 'created_at', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Discussion)
class DiscussionAdmin(admin.ModelAdmin):
    """Admin interface for Discussions."""

    list_display = ['title', 'group', 'username', 'like_count', 'created_at']
    list_filter = ['created_at']
    search_fields = ['title', 'content', 'slug', 'username', 'group__name']
    readonly_fields = ['slug', 'likes', 'created_at']
    inlines = [CommentInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def like_count(self, obj):
        """Show number of likes."""
        return len(obj.likes or [])
    like_count.short_description = 'Likes'

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('group')
