"""
Data access for posts.

`PostRepository` is the only code that talks to the ORM on behalf of the Posts
resource. The controller receives an instance (see `PostViewSet.repository`)
instead of reaching for `Post.objects` itself, which keeps the handlers free of
query code and lets tests swap in a failing or in-memory repository.

Errors
------
Any `django.db.DatabaseError` is logged and re-raised as
`core.exceptions.DataAccessError` (HTTP 503), with the original error chained.
A missing row is not an error here: `fetch_by_id` returns `None` and the caller
decides how to answer.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from django.db import DatabaseError

from core.exceptions import DataAccessError

from .models import Post

logger = logging.getLogger(__name__)


@contextmanager
def _data_access(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.exception("post repository %s failed", operation)
        raise DataAccessError() from exc


class PostRepository:
    """CRUD and bulk delete over the `Post` table."""

    def fetch_all(self) -> list[Post]:
        with _data_access("fetch_all"):
            return list(Post.objects.all())

    def fetch_by_id(self, post_id) -> Optional[Post]:
        """Return the post with primary key `post_id`, or None when there is none."""
        with _data_access("fetch_by_id"):
            return Post.objects.filter(pk=post_id).first()

    def save(self, post: Post) -> Post:
        """Insert or update `post`; on insert the database assigns `post.id`."""
        with _data_access("save"):
            post.save()
        return post

    def delete_one(self, post: Post) -> None:
        with _data_access("delete_one"):
            post.delete()

    def delete_all(self) -> int:
        """Delete every post and return how many rows went away."""
        with _data_access("delete_all"):
            deleted, _ = Post.objects.all().delete()
        return deleted
