"""
Request decoding and serialization for posts.

`PostSerializer` is the payload schema: `content` is required (non-blank
string), `id` is read-only. The two decoder helpers turn a DRF request into
something the controller can persist:

- `decode_post(request)`: full payload -> unsaved `Post`. Used by create and
  replace, so a replace without `content` is rejected just like a create.
- `decode_updates(request)`: partial payload -> dict of validated, non-null
  fields to merge onto an existing post (PATCH).

Both raise `core.exceptions.BadRequest` when there is no JSON object to decode
(including form-encoded bodies, which the JSON-only controller does not parse),
and DRF `ValidationError` (also 400) when fields are missing or malformed.
Neither touches the database.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from rest_framework import serializers
from rest_framework.exceptions import UnsupportedMediaType
from rest_framework.request import Request

from core.exceptions import BadRequest

from .models import Post


class StrictCharField(serializers.CharField):
    """`CharField` that refuses numbers instead of coercing them to text."""

    default_error_messages = {"invalid": "Not a valid string."}

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class PostSerializer(serializers.ModelSerializer):
    """Wire representation of a post: `{"id": ..., "content": ...}`."""
    content = StrictCharField(allow_blank=False)

    class Meta:
        model = Post
        fields = ["id", "content"]
        read_only_fields = ["id"]


def _payload(request: Request) -> Mapping:
    try:
        data = request.data
    except UnsupportedMediaType as exc:
        raise BadRequest() from exc
    if not isinstance(data, Mapping) or not data:
        raise BadRequest()
    return data


def decode_post(request: Request) -> Post:
    """Build an unsaved `Post` from a complete request payload."""
    serializer = PostSerializer(data=_payload(request))
    serializer.is_valid(raise_exception=True)
    return Post(**serializer.validated_data)


def decode_updates(request: Request) -> Dict[str, Any]:
    """
    Validate the non-null fields of a partial payload.

    Keys whose value is null are treated as absent, so `{"content": null}`
    leaves the stored content untouched. Unknown and read-only keys are ignored.
    """
    data = {key: value for key, value in _payload(request).items() if value is not None}
    serializer = PostSerializer(data=data, partial=True)
    serializer.is_valid(raise_exception=True)
    return dict(serializer.validated_data)
