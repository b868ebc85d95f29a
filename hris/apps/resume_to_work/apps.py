from django.apps import AppConfig


class ResumeToWorkConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hris.apps.resume_to_work'
    verbose_name = '6. Возвращение на работу'
