from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    """
    Configuration for the notifications app.

    Imports the signal handlers in ``ready`` so that committed domain
    events are delivered to the notifier.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "hris.apps.notifications"
    verbose_name = "7. Уведомления"

    def ready(self):
        import hris.apps.notifications.signals  # noqa: F401
