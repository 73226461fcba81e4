from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'discussions'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.DiscussionViewSet, basename='discussion')

urlpatterns = [
    # Discussion ViewSet routes
    # GET    /api/discussions/          - List all discussions
    # POST   /api/discussions/          - Create discussion
    # DELETE /api/discussions/{id}/     - Delete discussion

    # Likes
    # POST   /api/discussions/{id}/like/     - Like/unlike discussion
    # GET    /api/discussions/{id}/likes/    - Emails liking the discussion

    # Comments
    # GET    /api/discussions/{id}/comments/                   - List comments
    # POST   /api/discussions/{id}/comments/                   - Add comment
    # PUT    /api/discussions/{id}/comments/{comment_id}/      - Edit comment
    # DELETE /api/discussions/{id}/comments/{comment_id}/      - Delete comment (author)
    # POST   /api/discussions/{id}/comments/{comment_id}/like/ - Like/unlike comment
    # GET    /api/discussions/{id}/comments/{comment_id}/likes/ - Emails liking the comment

    # Additional endpoints
    path('by-slug/<slug:slug>/', views.discussion_by_slug, name='discussion-by-slug'),

    # Include router URLs
    path('', include(router.urls)),
]
