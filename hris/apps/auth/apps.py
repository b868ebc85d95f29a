from django.apps import AppConfig


class AuthConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hris.apps.auth'
    label = 'custom_auth'
    verbose_name = '1. Пользователи'
