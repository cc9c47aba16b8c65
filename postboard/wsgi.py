"""
WSGI entrypoint for Postboard.

Production servers (gunicorn, uWSGI) import `application` from here. The
settings module defaults to `postboard.settings.prod`; override with
`DJANGO_SETTINGS_MODULE` when needed.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "postboard.settings.prod")

application = get_wsgi_application()
