"""Tests for the `seed_posts` management command."""

from __future__ import annotations

from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase

from posts.models import Post


class SeedPostsCommandTests(TestCase):

    def test_seeds_requested_count(self):
        out = StringIO()
        call_command("seed_posts", "--count", "6", stdout=out)
        self.assertEqual(Post.objects.count(), 6)
        self.assertIn("Created 6 post(s).", out.getvalue())
        self.assertTrue(Post.objects.first().content.startswith("[1] "))

    def test_reset_clears_existing_posts_first(self):
        Post.objects.create(content="old")
        call_command("seed_posts", "--count", "2", "--reset", stdout=StringIO())
        self.assertEqual(Post.objects.count(), 2)
        self.assertFalse(Post.objects.filter(content="old").exists())

    def test_negative_count_is_rejected(self):
        with self.assertRaises(CommandError):
            call_command("seed_posts", count=-1, stdout=StringIO())
