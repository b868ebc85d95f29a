"""
Рассылка доменных событий.

Вызывается только после фиксации транзакции. Ни одна ошибка доставки
не должна дойти до вызывающего кода: транспорт и запись входящего
уведомления работают по принципу "отправил и забыл", сбои только
логируются.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging

from django.db import transaction

from hris.apps.departments.application.services import SupervisorAssignmentService
from hris.apps.notifications.domain.channels import resolve_targets
from hris.apps.notifications.domain.events import DomainEvent
from hris.apps.notifications.models import Notification
from hris.apps.notifications.services.transport import ChannelLayerTransport

logger = logging.getLogger(__name__)

NotificationType = Notification.NotificationType

# Имя события -> (тип входящего уведомления, общее ли оно)
INBOX_RULES: Dict[str, Tuple[str, bool]] = {
    'LeaveRequested': (NotificationType.LEAVE_REQUEST, False),
    'AbsenceRequested': (NotificationType.ABSENCE_REQUEST, False),
    'ReturnWorkRequested': (NotificationType.RESUME_TO_WORK, False),
    'RequestStatusUpdated': (NotificationType.REQUEST_STATUS_UPDATED, False),
    'ReturnWorkProcessed': (NotificationType.EMPLOYEE_RETURNED, True),
}


@dataclass
class DeliveryReport:
    event_id: str
    event_name: str
    recipient_id: Optional[int]
    delivered: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    notification_id: Optional[int] = None


class EventNotifier:
    def __init__(self, transport=None, supervisors: Optional[SupervisorAssignmentService] = None,
                 write_inbox: bool = True):
        self.transport = transport or ChannelLayerTransport()
        self.supervisors = supervisors or SupervisorAssignmentService()
        self.write_inbox = write_inbox

    def notify(self, event: DomainEvent) -> DeliveryReport:
        recipient_id = self.resolve_recipient(event)
        message = event.to_message()
        report = DeliveryReport(
            event_id=event.event_id,
            event_name=event.event_name,
            recipient_id=recipient_id,
        )

        for target in resolve_targets(recipient_id):
            try:
                self.transport.publish(target.name, event.event_name, message)
            except Exception:
                report.failed.append(target.name)
                logger.error(
                    "Failed to broadcast %s (%s #%s) to %s",
                    event.event_name, event.subject_kind.value, event.subject_id, target.name,
                    exc_info=True,
                )
            else:
                report.delivered.append(target.name)

        if report.delivered:
            logger.info(
                "%s (%s #%s) broadcast to %s",
                event.event_name, event.subject_kind.value, event.subject_id,
                ", ".join(report.delivered),
            )

        if self.write_inbox:
            notification = self._create_inbox_record(event, recipient_id, message)
            report.notification_id = notification.id if notification else None

        return report

    def resolve_recipient(self, event: DomainEvent) -> Optional[int]:
        """ID руководителя подразделения; при любой ошибке - только общий канал"""
        try:
            supervisor_id = self.supervisors.get_supervisor_for_department(event.department_id)
        except Exception:
            logger.error(
                "Supervisor lookup failed for %s (%s #%s), falling back to broadcast",
                event.event_name, event.subject_kind.value, event.subject_id,
                exc_info=True,
            )
            return None

        logger.info(
            "%s supervisor lookup: department=%s supervisor=%s",
            event.event_name, event.department_id, supervisor_id if supervisor_id is not None else 'none',
        )
        return supervisor_id

    def _create_inbox_record(self, event: DomainEvent, recipient_id: Optional[int],
                             message: dict) -> Optional[Notification]:
        rule = INBOX_RULES.get(event.event_name)
        if rule is None:
            return None

        notification_type, is_broadcast = rule
        if not is_broadcast and recipient_id is None:
            return None

        try:
            # Отдельная точка сохранения: сбой записи не ломает внешнюю транзакцию
            with transaction.atomic():
                return Notification.objects.create(
                    recipient_id=None if is_broadcast else recipient_id,
                    notification_type=notification_type,
                    data=message,
                    subject_kind=event.subject_kind.value,
                    subject_id=event.subject_id,
                )
        except Exception:
            logger.error(
                "Failed to create notification for %s (%s #%s)",
                event.event_name, event.subject_kind.value, event.subject_id,
                exc_info=True,
            )
            return None
