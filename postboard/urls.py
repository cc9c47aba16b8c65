"""
Project URL configuration.

Surfaces
--------
- `/posts/` and `/posts/<id>/`: the Posts resource (router-driven, see
  `posts.api.routers.ResourceRouter` for the extra collection DELETE).
- `/health/`: DB connectivity probe for load balancers.
- `/api/schema/`, `/api/docs/`: OpenAPI schema & Swagger UI.
- `/admin/`: Django admin (back-office only).
"""

from __future__ import annotations

from django.contrib import admin
from django.urls import include, path

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.views import health
from posts.api import PostViewSet
from posts.api.routers import ResourceRouter

router = ResourceRouter()
router.register(r"posts", PostViewSet, basename="post")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health, name="health"),

    # OpenAPI / Docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("", include(router.urls)),
]
