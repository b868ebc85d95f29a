from django.apps import AppConfig


class DepartmentsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hris.apps.departments'
    verbose_name = '2. Подразделения'
