from django.conf import settings
from django.db import models


class Department(models.Model):
    """Подразделение (участок) предприятия"""

    name = models.CharField(max_length=255, unique=True, verbose_name='Название')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'departments'
        verbose_name = 'Подразделение'
        verbose_name_plural = 'Подразделения'
        ordering = ['name']

    def __str__(self):
        return self.name


class SupervisorDepartment(models.Model):
    """
    Назначение руководителя на подразделение.

    Единственный источник истины для вопроса "кто курирует подразделение":
    по этой таблице определяется адресат приватных уведомлений.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='supervised_departments'
    )
    department = models.ForeignKey(
        Department,
        on_delete=models.CASCADE,
        related_name='supervisor_assignments'
    )
    can_evaluate = models.BooleanField(default=True, verbose_name='Может оценивать')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'supervisor_departments'
        verbose_name = 'Назначение руководителя'
        verbose_name_plural = 'Назначения руководителей'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'department'], name='unique_supervisor_department'),
        ]

    def __str__(self):
        return f"{self.user} -> {self.department}"
