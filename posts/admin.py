"""
Django admin registration for posts.

Back-office only: lets staff browse, search and fix individual posts without
going through the public API.
"""

from __future__ import annotations

from django.contrib import admin

from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("id", "__str__")
    search_fields = ("content",)
    ordering = ("-id",)
