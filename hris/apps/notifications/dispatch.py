"""
Точка входа для сервисов: ``emit_on_commit(event)``.

Событие уходит в сигнал ``domain_event_committed`` только после
фиксации транзакции, поэтому откат заявки не порождает уведомлений.
"""
import logging

from django.db import transaction
from django.dispatch import Signal

from hris.apps.notifications.domain.events import DomainEvent

logger = logging.getLogger(__name__)

# Аргументы: event
domain_event_committed = Signal()


def dispatch_event(event: DomainEvent) -> None:
    responses = domain_event_committed.send_robust(sender=DomainEvent, event=event)
    for receiver, response in responses:
        if isinstance(response, Exception):
            logger.error(
                "Receiver %s failed for %s (%s #%s): %s",
                getattr(receiver, '__name__', receiver), event.event_name,
                event.subject_kind.value, event.subject_id, response,
            )


def emit_on_commit(event: DomainEvent, using=None) -> None:
    transaction.on_commit(lambda: dispatch_event(event), using=using, robust=True)
