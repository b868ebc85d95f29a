"""
Адресация каналов real-time уведомлений.

Есть ровно два вида каналов: общий канал ``notifications``, на который
подписаны все авторизованные пользователи, и приватный канал
``supervisor.<id>`` конкретного руководителя.
"""
from dataclasses import dataclass
from typing import List, Optional

from django.conf import settings

DEFAULTS = {
    'SHARED_CHANNEL': 'notifications',
    'SUPERVISOR_CHANNEL_PREFIX': 'supervisor.',
}


def _setting(name: str) -> str:
    return getattr(settings, 'HRIS_NOTIFICATIONS', {}).get(name, DEFAULTS[name])


@dataclass(frozen=True)
class ChannelTarget:
    name: str
    recipient_id: Optional[int] = None

    @property
    def is_private(self) -> bool:
        return self.recipient_id is not None


def shared_channel() -> ChannelTarget:
    return ChannelTarget(name=_setting('SHARED_CHANNEL'))


def supervisor_channel(user_id: int) -> ChannelTarget:
    return ChannelTarget(
        name=f"{_setting('SUPERVISOR_CHANNEL_PREFIX')}{user_id}",
        recipient_id=user_id,
    )


def resolve_targets(recipient_id: Optional[int]) -> List[ChannelTarget]:
    """Общий канал всегда, приватный - только при найденном руководителе"""
    targets = [shared_channel()]
    if recipient_id is not None:
        targets.append(supervisor_channel(recipient_id))
    return targets
