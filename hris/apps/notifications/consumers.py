"""
WebSocket consumer for real-time notifications.

Every authenticated session joins the shared channel; assigned
supervisors additionally join their private ``supervisor.<id>`` channel.
Incoming events go through a per-session ``NotificationStore`` so that an
event delivered on both channels reaches the browser once.
"""
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer

from hris.apps.departments.application.services import SupervisorAssignmentService
from hris.apps.notifications.domain.channels import shared_channel, supervisor_channel
from hris.apps.notifications.store import NotificationStore

logger = logging.getLogger(__name__)


class NotificationConsumer(AsyncJsonWebsocketConsumer):
    async def connect(self):
        self.user = self.scope.get('user')
        self.subscriptions = []
        if not self.user or not self.user.is_authenticated:
            await self.close()
            return

        self.store = NotificationStore()
        self.subscriptions.append(shared_channel().name)
        if await self._is_supervisor():
            self.subscriptions.append(supervisor_channel(self.user.id).name)

        for group in self.subscriptions:
            await self.channel_layer.group_add(group, self.channel_name)
        await self.accept()
        await self.send_json({'action': 'subscribed', 'channels': self.subscriptions})
        logger.info("User %s subscribed to %s", self.user.id, ", ".join(self.subscriptions))

    async def disconnect(self, close_code):
        for group in getattr(self, 'subscriptions', []):
            await self.channel_layer.group_discard(group, self.channel_name)

    async def receive_json(self, content, **kwargs):
        action = content.get('action') if isinstance(content, dict) else None
        if action == 'mark_all_read':
            self.store.mark_all_read()
        elif action == 'mark_read':
            self.store.mark_read(str(content.get('event_id', '')))
        else:
            await self.send_json({'action': 'error', 'detail': f'Unknown action: {action}'})
            return
        await self.send_json({'action': 'unread_count', 'unread_count': self.store.unread_count})

    async def notification_message(self, event):
        """Отправка уведомления клиенту"""
        entry = self.store.add(event.get('event'), event.get('message') or {}, channel=event.get('channel'))
        if entry is None:
            return
        await self.send_json({
            'action': 'notification',
            'event': entry.event,
            'channel': entry.channel,
            'notification': entry.payload,
            'unread_count': self.store.unread_count,
        })

    @database_sync_to_async
    def _is_supervisor(self):
        return SupervisorAssignmentService().is_supervisor(self.user)
