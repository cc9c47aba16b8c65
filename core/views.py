"""Core utility views (unauthenticated).

- `health`: readiness probe that checks DB connectivity and returns a minimal
  JSON payload for load balancers / orchestrators.
"""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils.timezone import now

logger = logging.getLogger(__name__)


def health(request):
    """
    Report service liveness and database reachability.

    Returns:
        200 JSON when the DB connection can be established; 503 JSON otherwise.
    """
    status = 200
    payload = {
        "app": "postboard",
        "time": now().isoformat(),
        "db": "ok",
    }
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.warning("health check: database unreachable: %s", exc)
        payload["db"] = "down"
        payload["error"] = str(exc)
        status = 503
    return JsonResponse(payload, status=status)
