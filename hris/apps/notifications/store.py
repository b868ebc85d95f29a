"""
Хранилище уведомлений одной WebSocket-сессии.

Только добавление, с проверкой идентификатора при вставке: руководитель
подписан и на общий, и на свой приватный канал, поэтому одно и то же
событие приходит к нему дважды.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from django.utils import timezone

from hris.apps.notifications.domain.events import KNOWN_EVENT_NAMES


@dataclass
class StoredNotification:
    event_id: str
    event: str
    payload: Dict[str, Any]
    channel: Optional[str] = None
    received_at: datetime = field(default_factory=timezone.now)
    is_read: bool = False


class NotificationStore:
    def __init__(self):
        self._entries: List[StoredNotification] = []
        self._index: Dict[str, StoredNotification] = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, event_id):
        return event_id in self._index

    @staticmethod
    def identifier(event_name: str, payload: Dict[str, Any]) -> Optional[str]:
        event_id = payload.get('event_id')
        if event_id:
            return str(event_id)
        subject_id = payload.get('subject_id')
        if subject_id is None:
            return None
        return f"{event_name}:{payload.get('subject_kind')}:{subject_id}:{payload.get('status')}"

    def add(self, event_name: str, payload: Dict[str, Any],
            channel: Optional[str] = None) -> Optional[StoredNotification]:
        """
        Добавляет уведомление. Возвращает None для неизвестного события,
        сообщения без идентификатора или уже полученного события.
        """
        if event_name not in KNOWN_EVENT_NAMES:
            return None
        event_id = self.identifier(event_name, payload)
        if event_id is None or event_id in self._index:
            return None

        entry = StoredNotification(event_id=event_id, event=event_name, payload=dict(payload), channel=channel)
        self._entries.append(entry)
        self._index[event_id] = entry
        return entry

    @property
    def entries(self) -> Tuple[StoredNotification, ...]:
        """Новые сверху"""
        return tuple(reversed(self._entries))

    @property
    def unread_count(self) -> int:
        return sum(1 for entry in self._entries if not entry.is_read)

    def mark_read(self, event_id: str) -> bool:
        entry = self._index.get(event_id)
        if entry is None or entry.is_read:
            return False
        entry.is_read = True
        return True

    def mark_all_read(self) -> int:
        count = 0
        for entry in self._entries:
            if not entry.is_read:
                entry.is_read = True
                count += 1
        return count
