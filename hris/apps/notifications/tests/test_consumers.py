import pytest
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser

from hris.config.asgi import application
from tests.fixtures.factories import SupervisorDepartmentFactory, UserFactory


async def _connect(user):
    communicator = WebsocketCommunicator(application, "/ws/notifications/")
    communicator.scope["user"] = user
    connected, _ = await communicator.connect()
    return communicator, connected


def _notification(channel, event_id='evt-1', subject_id=7):
    return {
        'type': 'notification.message',
        'event': 'LeaveRequested',
        'channel': channel,
        'message': {
            'event_id': event_id,
            'event': 'LeaveRequested',
            'subject_kind': 'leave',
            'subject_id': subject_id,
            'status': 'pending',
        },
    }


@pytest.mark.django_db(transaction=True)
@pytest.mark.asyncio
async def test_unauthenticated_user_cannot_connect():
    communicator, connected = await _connect(AnonymousUser())
    assert not connected


@pytest.mark.django_db(transaction=True)
@pytest.mark.asyncio
async def test_regular_user_subscribes_to_shared_channel_only():
    user = await database_sync_to_async(UserFactory)()
    communicator, connected = await _connect(user)
    assert connected

    response = await communicator.receive_json_from()
    assert response == {'action': 'subscribed', 'channels': ['notifications']}
    await communicator.disconnect()


@pytest.mark.django_db(transaction=True)
@pytest.mark.asyncio
async def test_supervisor_receives_event_once():
    """Событие приходит по двум каналам, но клиенту отправляется один раз"""
    assignment = await database_sync_to_async(SupervisorDepartmentFactory)()
    supervisor_channel = f'supervisor.{assignment.user_id}'
    user = await database_sync_to_async(lambda: assignment.user)()

    communicator, connected = await _connect(user)
    assert connected
    subscribed = await communicator.receive_json_from()
    assert subscribed['channels'] == ['notifications', supervisor_channel]

    channel_layer = get_channel_layer()
    await channel_layer.group_send('notifications', _notification('notifications'))
    await channel_layer.group_send(supervisor_channel, _notification(supervisor_channel))

    response = await communicator.receive_json_from()
    assert response['action'] == 'notification'
    assert response['event'] == 'LeaveRequested'
    assert response['notification']['subject_id'] == 7
    assert response['unread_count'] == 1
    assert await communicator.receive_nothing(timeout=0.2)

    await communicator.send_json_to({'action': 'mark_all_read'})
    response = await communicator.receive_json_from()
    assert response == {'action': 'unread_count', 'unread_count': 0}

    await communicator.disconnect()


@pytest.mark.django_db(transaction=True)
@pytest.mark.asyncio
async def test_unknown_action_returns_error():
    user = await database_sync_to_async(UserFactory)()
    communicator, connected = await _connect(user)
    assert connected
    await communicator.receive_json_from()

    await communicator.send_json_to({'action': 'dance'})
    response = await communicator.receive_json_from()
    assert response['action'] == 'error'

    await communicator.disconnect()
