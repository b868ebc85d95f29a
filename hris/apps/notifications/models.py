from django.conf import settings
from django.db import models
from django.utils import timezone


class Notification(models.Model):
    """
    Входящее уведомление.

    Пустой ``recipient`` означает общее уведомление для всех.
    После создания меняется только ``read_at``.
    """

    class NotificationType(models.TextChoices):
        LEAVE_REQUEST = 'leave_request', 'Заявка на отпуск'
        ABSENCE_REQUEST = 'absence_request', 'Заявка на отсутствие'
        RESUME_TO_WORK = 'resume_to_work', 'Возвращение на работу'
        REQUEST_STATUS_UPDATED = 'request_status_updated', 'Изменение статуса заявки'
        EMPLOYEE_RETURNED = 'employee_returned', 'Сотрудник вернулся'

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='notifications'
    )
    notification_type = models.CharField(max_length=50, choices=NotificationType.choices)
    data = models.JSONField(default=dict, blank=True, help_text="Снимок события в формате JSON")

    # Связь с заявкой, породившей уведомление
    subject_kind = models.CharField(max_length=30, blank=True)
    subject_id = models.BigIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    read_at = models.DateTimeField(null=True, blank=True, help_text="Дата и время прочтения")

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['recipient', 'read_at'], name='notification_inbox_idx'),
        ]

    def __str__(self):
        return f"{self.get_notification_type_display()} #{self.subject_id}"

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    def mark_read(self) -> None:
        if self.read_at is None:
            self.read_at = timezone.now()
            self.save(update_fields=['read_at'])
