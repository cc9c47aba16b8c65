"""
HTML rendering for the Posts resource.

`TemplateViewRenderer.render("index", {...}, request)` renders
`posts/index.html` through Django's template engine and returns an
`HttpResponse`. Template lookup or syntax failures are logged and raised as
`core.exceptions.RenderError` (HTTP 500).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.template import TemplateDoesNotExist, TemplateSyntaxError

from core.exceptions import RenderError

logger = logging.getLogger(__name__)


class TemplateViewRenderer:
    """Render named templates from the `posts/` template directory."""

    template_dir = "posts"
    extension = ".html"

    def template_path(self, template_name: str) -> str:
        return f"{self.template_dir}/{template_name}{self.extension}"

    def render(self, template_name: str, context: Mapping[str, Any], request: HttpRequest) -> HttpResponse:
        path = self.template_path(template_name)
        try:
            return render(request, path, dict(context))
        except (TemplateDoesNotExist, TemplateSyntaxError) as exc:
            logger.exception("failed to render template %s", path)
            raise RenderError() from exc
