from django.db import models


class Post(models.Model):
    """
    A single post: an auto-assigned id and a text body.

    `content` is the only client-writable field; it must be present (and
    non-blank) for a post to be created. The id is assigned by the database on
    the first save and never changes afterwards.
    """
    content = models.TextField()

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        preview = self.content if len(self.content) <= 40 else f"{self.content[:37]}..."
        return f"Post #{self.pk} • {preview}"
