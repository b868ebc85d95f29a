from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from hris.apps.leaves.models import Leave, LeaveCredit
from hris.apps.notifications.models import Notification
from hris.apps.notifications.services.transport import ChannelLayerTransport, TransportError
from tests.fixtures.factories import (
    EmployeeFactory,
    LeaveFactory,
    SupervisorDepartmentFactory,
    UserFactory,
)


def _payload(employee, **overrides):
    data = {
        'employee_id': employee.id,
        'leave_type': 'Vacation Leave',
        'leave_start_date': '2026-03-02',
        'leave_end_date': '2026-03-04',
        'leave_days': 3,
        'leave_reason': 'Family vacation',
        'leave_date_reported': '2026-02-20',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestLeaveAPI:

    def setup_method(self):
        self.client = APIClient()
        self.assignment = SupervisorDepartmentFactory()
        self.supervisor = self.assignment.user
        self.employee = EmployeeFactory(department=self.assignment.department)
        self.hr_admin = UserFactory(role='hr_admin')
        self.client.force_authenticate(user=self.hr_admin)

    def test_submit_notifies_shared_and_supervisor_channels(self, django_capture_on_commit_callbacks):
        """Тест: одна общая рассылка и одно сообщение руководителю подразделения"""
        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(reverse('leave-list'), _payload(self.employee), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        leave_id = response.data['id']

        calls = [c.args for c in publish.call_args_list]
        assert [channel for channel, _, _ in calls] == ['notifications', f'supervisor.{self.supervisor.id}']
        for _, event_name, message in calls:
            assert event_name == 'LeaveRequested'
            assert message['subject_id'] == leave_id
            assert message['leave_id'] == leave_id
            assert message['status'] == 'pending'

        notification = Notification.objects.get(subject_kind='leave', subject_id=leave_id)
        assert notification.recipient_id == self.supervisor.id
        assert notification.notification_type == 'leave_request'

    def test_submit_without_supervisor_is_broadcast_only(self, django_capture_on_commit_callbacks):
        employee = EmployeeFactory()

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(reverse('leave-list'), _payload(employee), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        publish.assert_called_once()
        channel_name, _, message = publish.call_args.args
        assert channel_name == 'notifications'
        assert message['subject_id'] == response.data['id']
        assert not Notification.objects.exists()

    def test_transport_failure_does_not_change_response(self, django_capture_on_commit_callbacks):
        with patch.object(ChannelLayerTransport, 'publish', side_effect=TransportError("down")):
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(reverse('leave-list'), _payload(self.employee), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Leave.objects.filter(pk=response.data['id']).exists()
        # Входящее уведомление пишется независимо от транспорта
        assert Notification.objects.filter(subject_id=response.data['id']).count() == 1

    def test_invalid_period_returns_400_without_event(self, django_capture_on_commit_callbacks):
        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True) as callbacks:
                response = self.client.post(
                    reverse('leave-list'),
                    _payload(self.employee, leave_start_date='2026-03-05', leave_end_date='2026-03-01'),
                    format='json',
                )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'leave_end_date' in response.data
        assert callbacks == []
        publish.assert_not_called()

    def test_insufficient_credits_returns_400(self):
        LeaveCredit.objects.create(employee=self.employee, total_credits=12, used_credits=11)
        response = self.client.post(reverse('leave-list'), _payload(self.employee), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'leave_days' in response.data

    def test_supervisor_approves_leave(self, django_capture_on_commit_callbacks):
        leave = LeaveFactory(employee=self.employee, leave_days=2)
        self.client.force_authenticate(user=self.supervisor)

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(
                    reverse('leave-update-status', args=[leave.id]),
                    {'leave_status': 'approved', 'leave_comments': 'Enjoy'},
                    format='json',
                )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['leave_status'] == 'approved'
        assert LeaveCredit.objects.get(employee=self.employee).used_credits == 2
        assert {c.args[1] for c in publish.call_args_list} == {'RequestStatusUpdated'}
        assert Notification.objects.filter(notification_type='request_status_updated').count() == 1

    def test_supervisor_of_other_department_cannot_review(self):
        leave = LeaveFactory(employee=EmployeeFactory())
        self.client.force_authenticate(user=self.supervisor)

        response = self.client.post(
            reverse('leave-update-status', args=[leave.id]),
            {'leave_status': 'approved'},
            format='json',
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_is_scoped_for_supervisor(self):
        own = LeaveFactory(employee=self.employee)
        LeaveFactory(employee=EmployeeFactory())
        self.client.force_authenticate(user=self.supervisor)

        response = self.client.get(reverse('leave-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data['results']] == [own.id]

    def test_credits(self):
        response = self.client.get(reverse('leave-credits'), {'employee': self.employee.id})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_credits'] == 12
        assert response.data['remaining_credits'] == 12

        response = self.client.get(reverse('leave-credits'))
        assert [item['employee'] for item in response.data] == [self.employee.id]
