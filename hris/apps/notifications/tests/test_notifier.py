import logging
from unittest.mock import Mock

import pytest

from hris.apps.departments.application.services import SupervisorAssignmentService
from hris.apps.notifications import payloads
from hris.apps.notifications.models import Notification
from hris.apps.notifications.services.notifier import EventNotifier
from hris.apps.notifications.services.transport import TransportError
from tests.fixtures.factories import (
    EmployeeFactory,
    LeaveFactory,
    ResumeToWorkFactory,
    SupervisorDepartmentFactory,
    UserFactory,
)


class RecordingTransport:
    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.published = []

    def publish(self, channel_name, event_name, payload):
        if channel_name in self.fail_on:
            raise TransportError(f"{channel_name} is down")
        self.published.append((channel_name, event_name, payload))


@pytest.mark.django_db
class TestEventNotifier:

    def setup_method(self):
        self.assignment = SupervisorDepartmentFactory()
        self.supervisor = self.assignment.user
        self.employee = EmployeeFactory(department=self.assignment.department)
        self.transport = RecordingTransport()
        self.notifier = EventNotifier(transport=self.transport)

    def test_publishes_to_shared_and_supervisor_channels(self):
        leave = LeaveFactory(employee=self.employee)
        report = self.notifier.notify(payloads.leave_requested(leave))

        channels = [channel for channel, _, _ in self.transport.published]
        assert channels == ['notifications', f'supervisor.{self.supervisor.id}']
        assert {event for _, event, _ in self.transport.published} == {'LeaveRequested'}
        assert {payload['subject_id'] for _, _, payload in self.transport.published} == {leave.id}
        assert report.recipient_id == self.supervisor.id
        assert report.failed == []

    def test_broadcast_only_without_supervisor(self):
        employee = EmployeeFactory()
        leave = LeaveFactory(employee=employee)

        report = self.notifier.notify(payloads.leave_requested(leave))

        assert [channel for channel, _, _ in self.transport.published] == ['notifications']
        assert report.recipient_id is None
        assert report.notification_id is None
        assert not Notification.objects.exists()

    def test_inbox_record_for_supervisor(self):
        leave = LeaveFactory(employee=self.employee)
        report = self.notifier.notify(payloads.leave_requested(leave))

        notification = Notification.objects.get(pk=report.notification_id)
        assert notification.recipient_id == self.supervisor.id
        assert notification.notification_type == Notification.NotificationType.LEAVE_REQUEST
        assert notification.subject_kind == 'leave'
        assert notification.subject_id == leave.id
        assert notification.data['status'] == 'pending'
        assert notification.read_at is None

    def test_status_update_inbox_record(self):
        leave = LeaveFactory(employee=self.employee, leave_status='approved')
        report = self.notifier.notify(payloads.leave_status_updated(leave, previous_status='pending'))

        notification = Notification.objects.get(pk=report.notification_id)
        assert notification.notification_type == Notification.NotificationType.REQUEST_STATUS_UPDATED
        assert notification.data['previous_status'] == 'pending'
        assert notification.data['status'] == 'approved'

    def test_processed_return_is_broadcast_to_inbox(self):
        hr_admin = UserFactory(role='hr_admin')
        resume = ResumeToWorkFactory(employee=self.employee)
        resume.mark_processed(hr_admin)

        report = self.notifier.notify(payloads.return_work_processed(resume))

        notification = Notification.objects.get(pk=report.notification_id)
        assert notification.recipient_id is None
        assert notification.notification_type == Notification.NotificationType.EMPLOYEE_RETURNED
        assert notification.data['processed_by'] == hr_admin.full_name

    def test_failed_channel_does_not_stop_others(self, caplog):
        transport = RecordingTransport(fail_on={'notifications'})
        notifier = EventNotifier(transport=transport)
        leave = LeaveFactory(employee=self.employee)

        with caplog.at_level(logging.ERROR):
            report = notifier.notify(payloads.leave_requested(leave))

        assert report.failed == ['notifications']
        assert report.delivered == [f'supervisor.{self.supervisor.id}']
        assert f'#{leave.id}' in caplog.text
        # Запись во входящие не зависит от успеха транспорта
        assert Notification.objects.filter(subject_id=leave.id).count() == 1

    def test_supervisor_lookup_error_degrades_to_broadcast(self):
        supervisors = Mock(spec=SupervisorAssignmentService)
        supervisors.get_supervisor_for_department.side_effect = RuntimeError("db is gone")
        notifier = EventNotifier(transport=self.transport, supervisors=supervisors)
        leave = LeaveFactory(employee=self.employee)

        report = notifier.notify(payloads.leave_requested(leave))

        assert report.recipient_id is None
        assert [channel for channel, _, _ in self.transport.published] == ['notifications']

    def test_inbox_failure_is_logged(self, monkeypatch, caplog):
        def broken_create(**kwargs):
            raise RuntimeError("insert failed")

        monkeypatch.setattr(Notification.objects, 'create', broken_create)
        leave = LeaveFactory(employee=self.employee)

        with caplog.at_level(logging.ERROR):
            report = self.notifier.notify(payloads.leave_requested(leave))

        assert report.notification_id is None
        assert len(report.delivered) == 2
        assert 'Failed to create notification' in caplog.text

    def test_inbox_can_be_disabled(self):
        notifier = EventNotifier(transport=self.transport, write_inbox=False)
        leave = LeaveFactory(employee=self.employee)

        notifier.notify(payloads.leave_requested(leave))

        assert not Notification.objects.exists()
