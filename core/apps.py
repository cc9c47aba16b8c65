"""AppConfig for the `core` app.

Scope
-----
Shared infrastructure used by the Posts resource:
- middleware (request-id logging and request size limits),
- logging helpers (request-id filter),
- API error types (`core.exceptions`) and the health probe.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Standard Django AppConfig; no models and no startup hooks."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
