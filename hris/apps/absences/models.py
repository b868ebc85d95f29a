from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models

from hris.apps.common.models import CreditBalance


class Absence(models.Model):
    """
    Заявка на отсутствие.

    Может быть подана без карточки сотрудника: ФИО, табельный номер и
    должность хранятся в самой заявке.
    """

    class AbsenceType(models.TextChoices):
        ANNUAL_LEAVE = 'Annual Leave', 'Annual Leave'
        PERSONAL_LEAVE = 'Personal Leave', 'Personal Leave'
        MATERNITY_PATERNITY = 'Maternity/Paternity', 'Maternity/Paternity'
        SICK_LEAVE = 'Sick Leave', 'Sick Leave'
        EMERGENCY_LEAVE = 'Emergency Leave', 'Emergency Leave'
        OTHER = 'Other', 'Other'

    class AbsenceStatus(models.TextChoices):
        PENDING = 'pending', 'Pending'
        APPROVED = 'approved', 'Approved'
        REJECTED = 'rejected', 'Rejected'

    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='absences'
    )
    full_name = models.CharField(max_length=255)
    employee_id_number = models.CharField(max_length=255)
    department = models.ForeignKey(
        'departments.Department',
        on_delete=models.PROTECT,
        related_name='absences'
    )
    position = models.CharField(max_length=255)
    absence_type = models.CharField(max_length=30, choices=AbsenceType.choices)
    from_date = models.DateField()
    to_date = models.DateField()
    is_partial_day = models.BooleanField(default=False)
    reason = models.TextField(validators=[MinLengthValidator(10)])
    status = models.CharField(
        max_length=20,
        choices=AbsenceStatus.choices,
        default=AbsenceStatus.PENDING
    )
    submitted_at = models.DateTimeField(auto_now_add=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='approved_absences'
    )
    approval_comments = models.TextField(null=True, blank=True)

    class Meta:
        db_table = 'absences'
        verbose_name = 'Отсутствие'
        verbose_name_plural = 'Отсутствия'
        ordering = ['-submitted_at', '-id']

    def __str__(self):
        return f"{self.full_name} {self.absence_type} ({self.from_date} - {self.to_date})"

    @property
    def days(self) -> int:
        """Количество дней периода включительно"""
        return (self.to_date - self.from_date).days + 1


class AbsenceCredit(CreditBalance):
    """Баланс кредитов отсутствия"""
    default_credits_setting = 'HRIS_DEFAULT_ABSENCE_CREDITS'

    class Meta:
        db_table = 'absence_credits'
        verbose_name = 'Кредиты отсутствия'
        verbose_name_plural = 'Кредиты отсутствия'
