"""
Request decoder tests.

- `decode_post` yields an unsaved `Post` from a complete payload and rejects
  missing bodies (BadRequest) and missing/invalid `content` (ValidationError).
- `decode_updates` keeps only non-null, known, writable fields.
"""

from __future__ import annotations

from django.test import SimpleTestCase
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from core.exceptions import BadRequest
from posts.models import Post
from posts.serializers import PostSerializer, decode_post, decode_updates


def _json_request(method: str, data=None, **kwargs) -> Request:
    factory = APIRequestFactory()
    if data is None:
        raw = getattr(factory, method)("/posts/", **kwargs)
    else:
        raw = getattr(factory, method)("/posts/", data, format="json")
    return Request(raw, parsers=[JSONParser()])


class DecodePostTests(SimpleTestCase):

    def test_valid_payload_builds_unsaved_post(self):
        post = decode_post(_json_request("post", {"content": "hi"}))
        self.assertEqual(post.content, "hi")
        self.assertIsNone(post.pk)

    def test_read_only_id_is_dropped(self):
        post = decode_post(_json_request("post", {"id": 5, "content": "hi"}))
        self.assertIsNone(post.pk)

    def test_missing_body_is_bad_request(self):
        with self.assertRaises(BadRequest):
            decode_post(_json_request("post"))

    def test_empty_object_is_bad_request(self):
        with self.assertRaises(BadRequest):
            decode_post(_json_request("post", {}))

    def test_non_object_json_is_bad_request(self):
        with self.assertRaises(BadRequest):
            decode_post(_json_request("post", ["content"]))

    def test_missing_content_is_validation_error(self):
        with self.assertRaises(ValidationError) as ctx:
            decode_post(_json_request("post", {"text": "hi"}))
        self.assertIn("content", ctx.exception.detail)

    def test_non_string_content_is_validation_error(self):
        with self.assertRaises(ValidationError):
            decode_post(_json_request("post", {"content": {"nested": True}}))

    def test_numeric_content_is_validation_error(self):
        for value in (12345, 1.5):
            with self.assertRaises(ValidationError) as ctx:
                decode_post(_json_request("post", {"content": value}))
            self.assertIn("content", ctx.exception.detail)

    def test_form_body_is_bad_request(self):
        raw = APIRequestFactory().post("/posts/", {"content": "form"})
        with self.assertRaises(BadRequest):
            decode_post(Request(raw, parsers=[JSONParser()]))

    def test_malformed_json_is_parse_error(self):
        raw = APIRequestFactory().post("/posts/", "{oops", content_type="application/json")
        with self.assertRaises(ParseError):
            decode_post(Request(raw, parsers=[JSONParser()]))


class DecodeUpdatesTests(SimpleTestCase):

    def test_only_non_null_fields_survive(self):
        self.assertEqual(decode_updates(_json_request("patch", {"content": None})), {})
        self.assertEqual(decode_updates(_json_request("patch", {"content": "x"})), {"content": "x"})

    def test_unknown_and_read_only_keys_are_ignored(self):
        updates = decode_updates(_json_request("patch", {"id": 3, "extra": 1, "content": "x"}))
        self.assertEqual(updates, {"content": "x"})

    def test_numeric_content_is_rejected(self):
        with self.assertRaises(ValidationError):
            decode_updates(_json_request("patch", {"content": 1.5}))

    def test_blank_content_is_rejected(self):
        with self.assertRaises(ValidationError):
            decode_updates(_json_request("patch", {"content": ""}))

    def test_missing_body_is_bad_request(self):
        with self.assertRaises(BadRequest):
            decode_updates(_json_request("patch"))


class PostSerializerTests(SimpleTestCase):

    def test_representation_has_id_and_content_only(self):
        self.assertEqual(PostSerializer(Post(pk=7, content="c")).data, {"id": 7, "content": "c"})
