from __future__ import annotations

"""
Posts resource controller.

`PostViewSet` binds the seven REST operations on `/posts/` to the data access
and rendering collaborators:

| HTTP                  | handler          | operation |
|-----------------------|------------------|-----------|
| GET    /posts/        | `list`           | index     |
| POST   /posts/        | `create`         | create    |
| DELETE /posts/        | `clear`          | clear     |
| GET    /posts/{id}/   | `retrieve`       | show      |
| PATCH  /posts/{id}/   | `partial_update` | update    |
| PUT    /posts/{id}/   | `update`         | replace   |
| DELETE /posts/{id}/   | `destroy`        | delete    |

Collaborators
-------------
- `repository` (`PostRepository`) performs every read and write.
- `view_renderer` (`TemplateViewRenderer`) renders the HTML index.
Both are class attributes, so they can be swapped per route with
`PostViewSet.as_view({...}, repository=...)` or patched in tests.

Status codes
------------
The index always answers HTML through `view_renderer`, whatever the `Accept`
header says; it is the only handler that skips DRF content negotiation.
Writes answer 200 with the serialized post; deletes answer 200 with an empty
body. Unknown ids are 404, undecodable bodies 400, storage failures 503 and
template failures 500 (see `core.exceptions`).

Replace semantics
-----------------
PUT requires a complete, valid payload (same rules as create) and then copies
`content` onto the stored post; the id never changes.
"""

import logging

from django.conf import settings
from rest_framework import status, viewsets
from rest_framework.parsers import JSONParser
from rest_framework.response import Response

from drf_spectacular.utils import extend_schema, extend_schema_view

from core.exceptions import NotFound
from posts.models import Post
from posts.rendering import TemplateViewRenderer
from posts.repository import PostRepository
from posts.serializers import PostSerializer, decode_post, decode_updates

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(tags=["Posts"], description="Render the HTML index of all posts."),
    create=extend_schema(tags=["Posts"], description="Create a post from a JSON body.", responses={200: PostSerializer}),
    retrieve=extend_schema(tags=["Posts"], description="Show a single post."),
    partial_update=extend_schema(tags=["Posts"], description="Merge the non-null fields of the body onto a post."),
    update=extend_schema(tags=["Posts"], description="Replace a post's content from a complete JSON body."),
    destroy=extend_schema(tags=["Posts"], description="Delete a post.", responses={200: None}),
    clear=extend_schema(tags=["Posts"], description="Delete every post.", request=None, responses={200: None}),
)
class PostViewSet(viewsets.GenericViewSet):
    """REST controller for posts; stateless apart from its collaborators."""
    lookup_value_regex = r"\d+"
    serializer_class = PostSerializer
    parser_classes = [JSONParser]  # bodies are JSON objects only; anything else is a 400
    queryset = Post.objects.none()  # schema generation only; reads go through `repository`

    repository = PostRepository()
    view_renderer = TemplateViewRenderer()

    def get_object(self) -> Post:
        """Resolve the post named in the URL or raise 404."""
        post = self.repository.fetch_by_id(self.kwargs[self.lookup_field])
        if post is None:
            raise NotFound("Post not found.")
        return post

    def list(self, request, *args, **kwargs):
        posts = self.repository.fetch_all()
        return self.view_renderer.render("index", {"posts": posts}, request)

    def create(self, request, *args, **kwargs):
        post = self.repository.save(decode_post(request))
        logger.info("post created id=%s", post.pk)
        return Response(self.get_serializer(post).data, status=status.HTTP_200_OK)

    def retrieve(self, request, *args, **kwargs):
        return Response(self.get_serializer(self.get_object()).data)

    def partial_update(self, request, *args, **kwargs):
        post = self.get_object()
        updates = decode_updates(request)
        for field, value in updates.items():
            setattr(post, field, value)
        self.repository.save(post)
        logger.info("post updated id=%s fields=%s", post.pk, ",".join(sorted(updates)) or "-")
        return Response(self.get_serializer(post).data)

    def update(self, request, *args, **kwargs):
        post = self.get_object()
        replacement = decode_post(request)
        post.content = replacement.content
        self.repository.save(post)
        logger.info("post replaced id=%s", post.pk)
        return Response(self.get_serializer(post).data)

    def destroy(self, request, *args, **kwargs):
        post = self.get_object()
        post_id = post.pk
        self.repository.delete_one(post)
        logger.info("post deleted id=%s", post_id)
        return Response(status=status.HTTP_200_OK)

    def clear(self, request, *args, **kwargs):
        if not getattr(settings, "POSTS_ALLOW_CLEAR", True):
            return Response(
                {"detail": "Clearing all posts is disabled on this server.", "code": "clear_disabled"},
                status=status.HTTP_405_METHOD_NOT_ALLOWED,
            )
        count = self.repository.delete_all()
        logger.warning("posts cleared count=%s", count)
        return Response(status=status.HTTP_200_OK)
