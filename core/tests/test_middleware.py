"""
Middleware tests: request id correlation and request size limit.

What these tests verify
-----------------------
- Every response carries `X-Request-ID`; safe client ids are echoed, unsafe ones
  are replaced by a uuid4 hex.
- Exactly one INFO line per request lands on the `postboard.request` logger.
- Bodies above `MAX_REQUEST_BYTES` are rejected with 413 before any row is written.
"""

from __future__ import annotations

import logging

from django.test import override_settings
from rest_framework.test import APIClient, APITestCase

from core.logging import RequestIDFilter, request_id_var
from posts.models import Post


class RequestIDLogMiddlewareTests(APITestCase):

    def setUp(self):
        self.client = APIClient()

    def test_response_includes_request_id_and_logs_once(self):
        with self.assertLogs("postboard.request", level="INFO") as cap:
            r = self.client.get("/health/")
        self.assertEqual(r.status_code, 200)
        self.assertRegex(r.headers.get("X-Request-ID") or "", r"^[A-Za-z0-9._\-]{1,200}$")
        self.assertEqual(len(cap.records), 1)
        record = cap.records[0]
        self.assertEqual(record.method, "GET")
        self.assertEqual(record.path, "/health/")
        self.assertEqual(record.status, 200)

    def test_client_provided_request_id_is_respected(self):
        r = self.client.get("/health/", HTTP_X_REQUEST_ID="custom-123_OK")
        self.assertEqual(r.headers.get("X-Request-ID"), "custom-123_OK")

    def test_bad_client_request_id_is_replaced(self):
        r = self.client.get("/health/", HTTP_X_REQUEST_ID="BAD ID")
        self.assertNotEqual(r.headers.get("X-Request-ID"), "BAD ID")
        self.assertRegex(r.headers.get("X-Request-ID") or "", r"^[a-f0-9]{32}$")

    def test_request_id_filter_reads_contextvar(self):
        record = logging.LogRecord("posts", logging.INFO, __file__, 1, "msg", None, None)
        token = request_id_var.set("rid-42")
        try:
            RequestIDFilter().filter(record)
        finally:
            request_id_var.reset(token)
        self.assertEqual(record.request_id, "rid-42")

    def test_request_id_filter_defaults_to_dash(self):
        record = logging.LogRecord("posts", logging.INFO, __file__, 1, "msg", None, None)
        RequestIDFilter().filter(record)
        self.assertEqual(record.request_id, "-")


class RequestSizeLimitMiddlewareTests(APITestCase):

    @override_settings(MAX_REQUEST_BYTES=100)
    def test_oversized_post_is_rejected_413(self):
        r = self.client.post("/posts/", {"content": "A" * 200}, format="json")
        self.assertEqual(r.status_code, 413, r.content)
        self.assertEqual(r.json()["code"], "request_too_large")
        self.assertEqual(r.json()["max_bytes"], 100)
        self.assertFalse(Post.objects.exists())

    @override_settings(MAX_REQUEST_BYTES=100)
    def test_small_post_passes(self):
        r = self.client.post("/posts/", {"content": "short"}, format="json")
        self.assertEqual(r.status_code, 200, r.content)

    @override_settings(MAX_REQUEST_BYTES=100)
    def test_get_is_never_limited(self):
        r = self.client.get("/health/")
        self.assertEqual(r.status_code, 200)
