"""
Signal handlers for notifications.

Application services emit domain events through
``hris.apps.notifications.dispatch.emit_on_commit``; once the surrounding
transaction commits, the receiver below hands the event to the
``EventNotifier`` which broadcasts it over Channels and stores the
inbox record.
"""
from django.dispatch import receiver

from hris.apps.notifications.dispatch import domain_event_committed
from hris.apps.notifications.services.notifier import EventNotifier


@receiver(domain_event_committed, dispatch_uid="deliver_domain_event")
def deliver_domain_event(sender, event, **kwargs):
    return EventNotifier().notify(event)
