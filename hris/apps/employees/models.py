from django.conf import settings
from django.db import models


class Employee(models.Model):
    """Модель сотрудника"""

    class WorkStatus(models.TextChoices):
        REGULAR = 'Regular', 'Regular'
        PROBATIONARY = 'Probationary', 'Probationary'
        ADD_CREW = 'Add Crew', 'Add Crew'

    employee_id_number = models.CharField(max_length=50, unique=True, verbose_name='Табельный номер')
    employee_name = models.CharField(max_length=255, verbose_name='ФИО')
    department = models.ForeignKey(
        'departments.Department',
        on_delete=models.PROTECT,
        related_name='employees'
    )
    position = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)
    picture = models.CharField(max_length=500, blank=True, help_text='Путь к фотографии')
    work_status = models.CharField(
        max_length=20,
        choices=WorkStatus.choices,
        default=WorkStatus.REGULAR
    )
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='employee'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'employees'
        verbose_name = 'Сотрудник'
        verbose_name_plural = 'Сотрудники'
        ordering = ['employee_name']

    def __str__(self):
        return self.employee_name
