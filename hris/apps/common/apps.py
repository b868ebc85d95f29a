"""
Common app configuration
"""
from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hris.apps.common'
    verbose_name = 'Общие компоненты'
