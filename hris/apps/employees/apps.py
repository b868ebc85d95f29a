from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hris.apps.employees'
    verbose_name = '3. Сотрудники'
