# Re-exports for URL wiring:
#   from posts.api import PostViewSet

from .viewsets import PostViewSet

__all__ = ["PostViewSet"]
