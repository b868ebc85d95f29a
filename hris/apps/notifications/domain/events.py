"""
Доменные события, которые рассылаются после фиксации транзакции.

Событие неизменяемо и не хранится в БД: оно живет ровно столько,
сколько длится доставка. Для входящих уведомлений его снимок
дублируется в модель ``Notification``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from django.utils import timezone


class EventType(str, Enum):
    REQUEST_CREATED = 'request_created'
    STATUS_CHANGED = 'status_changed'
    PROCESSED = 'processed'


class SubjectKind(str, Enum):
    LEAVE = 'leave'
    ABSENCE = 'absence'
    RETURN_TO_WORK = 'return_to_work'


# Имя события в канале, на которое подписывается клиент
EVENT_NAMES: Dict[tuple, str] = {
    (EventType.REQUEST_CREATED, SubjectKind.LEAVE): 'LeaveRequested',
    (EventType.REQUEST_CREATED, SubjectKind.ABSENCE): 'AbsenceRequested',
    (EventType.REQUEST_CREATED, SubjectKind.RETURN_TO_WORK): 'ReturnWorkRequested',
    (EventType.STATUS_CHANGED, SubjectKind.LEAVE): 'RequestStatusUpdated',
    (EventType.STATUS_CHANGED, SubjectKind.ABSENCE): 'RequestStatusUpdated',
    (EventType.PROCESSED, SubjectKind.RETURN_TO_WORK): 'ReturnWorkProcessed',
}

KNOWN_EVENT_NAMES = frozenset(EVENT_NAMES.values())

# Служебные поля сообщения, которые нельзя перезаписать снимком
ENVELOPE_FIELDS = ('event_id', 'event', 'type', 'subject_kind', 'subject_id', 'occurred_at')


@dataclass(frozen=True)
class DomainEvent:
    """
    Событие изменения заявки.

    ``department_id`` нужен только для поиска адресата в момент
    рассылки и в сообщение не попадает.
    """
    type: EventType
    subject_id: int
    subject_kind: SubjectKind
    payload: Mapping[str, Any] = field(default_factory=dict)
    department_id: Optional[int] = None
    event_id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=timezone.now)

    def __post_init__(self):
        object.__setattr__(self, 'type', EventType(self.type))
        object.__setattr__(self, 'subject_kind', SubjectKind(self.subject_kind))
        if (self.type, self.subject_kind) not in EVENT_NAMES:
            raise ValueError(
                f"Unsupported event: {self.type.value} for {self.subject_kind.value}"
            )
        object.__setattr__(self, 'payload', MappingProxyType(dict(self.payload)))

    @property
    def event_name(self) -> str:
        return EVENT_NAMES[(self.type, self.subject_kind)]

    def to_message(self) -> Dict[str, Any]:
        """Плоское сообщение для канала и для поля ``data`` уведомления"""
        message = dict(self.payload)
        message.update({
            'event_id': self.event_id,
            'event': self.event_name,
            'type': self.type.value,
            'subject_kind': self.subject_kind.value,
            'subject_id': self.subject_id,
            'occurred_at': self.occurred_at.isoformat(),
        })
        return message
