from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'groups'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.GroupViewSet, basename='group')

urlpatterns = [
    # Group ViewSet routes
    # GET    /api/groups/              - List all groups
    # POST   /api/groups/              - Create group
    # DELETE /api/groups/{id}/         - Delete group and its discussions

    # Custom group actions
    # POST   /api/groups/{id}/join/        - Join group
    # POST   /api/groups/{id}/leave/       - Leave group
    # POST   /api/groups/{id}/membership/  - Check membership by email
    # GET    /api/groups/{id}/discussions/ - List group discussions

    # Additional endpoints
    path('by-slug/<slug:slug>/', views.group_by_slug, name='group-by-slug'),

    # Include router URLs
    path('', include(router.urls)),
]
