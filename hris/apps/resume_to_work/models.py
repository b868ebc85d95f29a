from django.conf import settings
from django.db import models
from django.utils import timezone


class ResumeToWork(models.Model):
    """Форма возвращения сотрудника на работу"""

    class ResumeStatus(models.TextChoices):
        PENDING = 'pending', 'Pending'
        PROCESSED = 'processed', 'Processed'

    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='resume_to_work_forms'
    )
    return_date = models.DateField()
    previous_absence_reference = models.CharField(max_length=255, blank=True)
    comments = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=ResumeStatus.choices,
        default=ResumeStatus.PENDING
    )
    processed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='processed_resume_to_work_forms'
    )
    processed_at = models.DateTimeField(null=True, blank=True)
    supervisor_notified = models.BooleanField(default=False)
    supervisor_notified_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'resume_to_work'
        verbose_name = 'Возвращение на работу'
        verbose_name_plural = 'Возвращения на работу'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.employee} -> {self.return_date}"

    @property
    def is_processed(self) -> bool:
        return self.status == self.ResumeStatus.PROCESSED

    def mark_processed(self, user) -> None:
        self.status = self.ResumeStatus.PROCESSED
        self.processed_by = user
        self.processed_at = timezone.now()
        self.save(update_fields=['status', 'processed_by', 'processed_at', 'updated_at'])

    def mark_supervisor_notified(self) -> None:
        self.supervisor_notified = True
        self.supervisor_notified_at = timezone.now()
        self.save(update_fields=['supervisor_notified', 'supervisor_notified_at', 'updated_at'])
