from hris.apps.notifications.store import NotificationStore


def _message(event_id='e-1', subject_id=10, status='pending'):
    return {'event_id': event_id, 'subject_id': subject_id, 'subject_kind': 'leave', 'status': status}


class TestNotificationStore:

    def setup_method(self):
        self.store = NotificationStore()

    def test_add_known_event(self):
        entry = self.store.add('LeaveRequested', _message(), channel='notifications')
        assert entry is not None
        assert entry.event_id == 'e-1'
        assert self.store.unread_count == 1
        assert 'e-1' in self.store

    def test_same_event_from_second_channel_is_ignored(self):
        """Руководитель получает событие и по общему, и по приватному каналу"""
        self.store.add('LeaveRequested', _message(), channel='notifications')
        duplicate = self.store.add('LeaveRequested', _message(), channel='supervisor.3')

        assert duplicate is None
        assert len(self.store) == 1
        assert self.store.unread_count == 1

    def test_unknown_event_is_ignored(self):
        assert self.store.add('SomethingElse', _message()) is None
        assert len(self.store) == 0

    def test_message_without_identifier_is_ignored(self):
        assert self.store.add('LeaveRequested', {'status': 'pending'}) is None

    def test_fallback_identifier_without_event_id(self):
        payload = {'subject_id': 10, 'subject_kind': 'leave', 'status': 'pending'}
        assert NotificationStore.identifier('LeaveRequested', payload) == 'LeaveRequested:leave:10:pending'

        self.store.add('LeaveRequested', payload)
        assert self.store.add('LeaveRequested', dict(payload)) is None
        assert self.store.add('LeaveRequested', dict(payload, status='approved')) is not None

    def test_entries_newest_first(self):
        self.store.add('LeaveRequested', _message('e-1'))
        self.store.add('AbsenceRequested', _message('e-2', subject_id=11))
        assert [e.event_id for e in self.store.entries] == ['e-2', 'e-1']

    def test_mark_read_and_mark_all_read(self):
        self.store.add('LeaveRequested', _message('e-1'))
        self.store.add('LeaveRequested', _message('e-2', subject_id=11))
        self.store.add('LeaveRequested', _message('e-3', subject_id=12))

        assert self.store.mark_read('e-1') is True
        assert self.store.mark_read('e-1') is False
        assert self.store.mark_read('missing') is False
        assert self.store.unread_count == 2

        assert self.store.mark_all_read() == 2
        assert self.store.unread_count == 0
