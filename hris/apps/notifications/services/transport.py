"""
Транспорт для публикации событий через Django Channels.

publish(channel, event, payload) превращается в ``group_send`` в группу
с именем канала; подключенные ``NotificationConsumer`` получают
сообщение в обработчике ``notification_message``.
"""
from typing import Any, Dict
import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

logger = logging.getLogger(__name__)

MESSAGE_TYPE = "notification.message"


class TransportError(Exception):
    """Транспорт недоступен или отказался принять сообщение"""


class ChannelLayerTransport:
    def __init__(self, channel_layer=None):
        self._channel_layer = channel_layer

    @property
    def channel_layer(self):
        if self._channel_layer is None:
            self._channel_layer = get_channel_layer()
        return self._channel_layer

    def publish(self, channel_name: str, event_name: str, payload: Dict[str, Any]) -> None:
        """
        Отправляет событие в канал без ожидания подписчиков.

        Args:
            channel_name: Имя канала (группы Channels)
            event_name: Имя события, например ``LeaveRequested``
            payload: Плоский JSON-совместимый снимок

        Raises:
            TransportError: если channel layer не настроен
        """
        channel_layer = self.channel_layer
        if channel_layer is None:
            raise TransportError("Channel layer not available")

        async_to_sync(channel_layer.group_send)(
            channel_name,
            {
                "type": MESSAGE_TYPE,
                "event": event_name,
                "channel": channel_name,
                "message": payload,
            },
        )
        logger.debug("Published %s to %s", event_name, channel_name)
