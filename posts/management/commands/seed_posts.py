from __future__ import annotations

"""
Seed development posts.

Creates `--count` numbered sample posts through `PostRepository`, so the same
error handling and logging apply as for API writes. `--reset` clears the table
first (same effect as `DELETE /posts/`).

Usage
-----
    python manage.py seed_posts
    python manage.py seed_posts --count 50 --reset
"""

from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.db import transaction

from core.exceptions import DataAccessError
from posts.models import Post
from posts.repository import PostRepository

SAMPLE_LINES = (
    "Hello, world!",
    "Posts are plain text records with an id.",
    "PATCH merges fields, PUT needs the full body.",
    "DELETE on the collection clears everything.",
)


class Command(BaseCommand):
    help = "Create sample posts for local development. Use --reset to clear existing posts first."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--count", type=int, default=10, help="Number of posts to create (default 10).")
        parser.add_argument("--reset", action="store_true", help="Delete all posts before seeding.")

    @transaction.atomic
    def handle(self, *args, **options):
        count = int(options["count"])
        if count < 0:
            raise CommandError("--count must be zero or positive.")

        repository = PostRepository()
        try:
            if options["reset"]:
                removed = repository.delete_all()
                self.stdout.write(self.style.WARNING(f"Deleted {removed} existing post(s)."))
            for n in range(1, count + 1):
                line = SAMPLE_LINES[(n - 1) % len(SAMPLE_LINES)]
                repository.save(Post(content=f"[{n}] {line}"))
        except DataAccessError as exc:
            raise CommandError(f"Seeding failed: {exc.detail}") from exc

        self.stdout.write(self.style.SUCCESS(f"Created {count} post(s)."))
