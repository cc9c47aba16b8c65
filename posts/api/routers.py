"""
Router for full REST resources.

DRF's `DefaultRouter` maps GET/POST on the collection and
GET/PUT/PATCH/DELETE on the detail route. `ResourceRouter` also routes
DELETE on the collection to a `clear` handler, so a viewset can expose all
seven resource operations from a single `register()` call. Viewsets without a
`clear` method are routed exactly as `DefaultRouter` would.
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

_list_route = DefaultRouter.routes[0]


class ResourceRouter(DefaultRouter):
    routes = [
        _list_route._replace(mapping={**_list_route.mapping, "delete": "clear"}),
        *DefaultRouter.routes[1:],
    ]
