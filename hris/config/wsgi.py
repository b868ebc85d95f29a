"""
WSGI config for the HRIS project.

This file exposes the WSGI callable as a module‑level variable named
``application``.  It serves plain HTTP only; real-time notifications
require the ASGI entrypoint in ``hris.config.asgi``.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hris.config.settings.production")

application = get_wsgi_application()
