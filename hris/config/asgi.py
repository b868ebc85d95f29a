"""
ASGI entrypoint for the HRIS project.

Defines the protocol type router to dispatch HTTP requests to Django's
ASGI application and WebSocket connections to the notifications
consumer via Channels.  ``AuthMiddlewareStack`` associates WebSocket
connections with a Django session so that supervisors are subscribed
to their own private channel.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hris.config.settings.production")

# Django must be set up before the routing modules import models
django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter  # noqa: E402
from channels.auth import AuthMiddlewareStack  # noqa: E402
from hris.apps.notifications.routing import websocket_urlpatterns  # noqa: E402

application = ProtocolTypeRouter(
    {
        "http": django_asgi_app,
        "websocket": AuthMiddlewareStack(URLRouter(websocket_urlpatterns)),
    }
)
