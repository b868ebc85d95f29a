from django.db import models

from hris.apps.common.models import CreditBalance


class Leave(models.Model):
    """Заявка на отпуск"""

    class LeaveStatus(models.TextChoices):
        PENDING = 'pending', 'Pending'
        APPROVED = 'approved', 'Approved'
        REJECTED = 'rejected', 'Rejected'
        CANCELLED = 'cancelled', 'Cancelled'

    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='leaves'
    )
    leave_type = models.CharField(max_length=100)
    leave_start_date = models.DateField()
    leave_end_date = models.DateField()
    leave_days = models.PositiveIntegerField()
    leave_reason = models.TextField()
    leave_comments = models.TextField(blank=True)
    leave_date_reported = models.DateField()
    leave_date_approved = models.DateField(null=True, blank=True)
    leave_status = models.CharField(
        max_length=20,
        choices=LeaveStatus.choices,
        default=LeaveStatus.PENDING
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'leaves'
        verbose_name = 'Отпуск'
        verbose_name_plural = 'Отпуска'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.employee} {self.leave_type} ({self.leave_start_date} - {self.leave_end_date})"


class LeaveCredit(CreditBalance):
    """Баланс отпускных кредитов"""
    default_credits_setting = 'HRIS_DEFAULT_LEAVE_CREDITS'

    class Meta:
        db_table = 'leave_credits'
        verbose_name = 'Кредиты отпуска'
        verbose_name_plural = 'Кредиты отпуска'
