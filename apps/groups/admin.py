# ==========================================
# apps/groups/admin.py
# ==========================================

from django.contrib import admin
from apps.groups.models import Group, GroupMember


class GroupMemberInline(admin.TabularInline):
    """Inline admin for group members."""
    model = GroupMember
    extra = 0
    fields = ['member_id', 'email', 'name', 'role', 'position', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    """Admin interface for Groups."""

    list_display = [
        'name',
        'slug',
        'category',
        'creator_email',
        'member_count',
        'created_at'
    ]
    list_filter = ['category', 'created_at']
    search_fields = ['name', 'description', 'slug', 'members__email']
    readonly_fields = ['slug', 'creator', 'created_at']
    inlines = [GroupMemberInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'category')
        }),
        ('Identity', {
            'fields': ('slug', 'creator')
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of members."""
        return obj.members.count()
    member_count.short_description = 'Members'

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.prefetch_related('members')
