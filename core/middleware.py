"""
Core middleware for request safety and observability.

Components
----------
- `RequestSizeLimitMiddleware`:
    * Rejects POST/PUT/PATCH bodies whose `Content-Length` exceeds
      `MAX_REQUEST_BYTES` with a pre-rendered 413 JSON response.
    * Runs before any parsing, so oversized posts never hit the decoder or DB.

- `RequestIDLogMiddleware`:
    * Accepts a safe client `X-Request-ID` or generates one, and echoes it back.
    * Binds the id to `core.logging.request_id_var` for the rest of the request.
    * Emits one INFO line per request on `postboard.request`.
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Callable, Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

from .exceptions import RequestTooLarge
from .logging import request_id_var

logger = logging.getLogger("postboard.request")

_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._\-]{1,200}$")
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def _coerce_request_id(raw: Optional[str]) -> str:
    """Keep a well-formed client id, otherwise mint a uuid4 hex."""
    if raw and _SAFE_REQUEST_ID.match(raw):
        return raw
    return uuid.uuid4().hex


def _content_length(request: HttpRequest) -> Optional[int]:
    raw = request.META.get("CONTENT_LENGTH")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class RequestSizeLimitMiddleware:
    """
    Reject overly large request bodies with 413, before any parsing.

    Requests without a usable `Content-Length` pass through. The limit is read
    per request so `override_settings(MAX_REQUEST_BYTES=...)` takes effect in tests;
    a limit of 0 disables the check.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        max_bytes = int(getattr(settings, "MAX_REQUEST_BYTES", 2_000_000))
        if request.method.upper() in _BODY_METHODS and max_bytes > 0:
            length = _content_length(request)
            if length is not None and length > max_bytes:
                return self._too_large(max_bytes)
        return self.get_response(request)

    @staticmethod
    def _too_large(max_bytes: int) -> Response:
        payload = {
            "detail": f"{RequestTooLarge.default_detail} Max {max_bytes} bytes.",
            "code": RequestTooLarge.default_code,
            "max_bytes": max_bytes,
        }
        # Render eagerly: this response never passes through a DRF view.
        resp = Response(payload, status=RequestTooLarge.status_code)
        resp.accepted_renderer = JSONRenderer()
        resp.accepted_media_type = "application/json"
        resp.renderer_context = {}
        resp.render()
        return resp


class RequestIDLogMiddleware:
    """Correlate every request with an id and log a single summary line for it."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        rid = _coerce_request_id(request.headers.get("X-Request-ID"))
        request.request_id = rid
        token = request_id_var.set(rid)

        start = time.perf_counter()
        try:
            response = self.get_response(request)
            duration_ms = int((time.perf_counter() - start) * 1000)
            response.headers["X-Request-ID"] = rid
            logger.info(
                "request",
                extra={
                    "request_id": rid,
                    "method": request.method,
                    "path": request.path,
                    "status": getattr(response, "status_code", 0),
                    "duration_ms": duration_ms,
                },
            )
        finally:
            request_id_var.reset(token)
        return response
