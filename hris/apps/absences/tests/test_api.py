from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from hris.apps.notifications.models import Notification
from hris.apps.notifications.services.transport import ChannelLayerTransport
from tests.fixtures.factories import AbsenceFactory, EmployeeFactory, SupervisorDepartmentFactory, UserFactory


@pytest.mark.django_db
class TestAbsenceAPI:

    def setup_method(self):
        self.client = APIClient()
        self.assignment = SupervisorDepartmentFactory()
        self.supervisor = self.assignment.user
        self.department = self.assignment.department
        self.employee = EmployeeFactory(department=self.department)

    def _payload(self, **overrides):
        data = {
            'employee_id': self.employee.id,
            'full_name': self.employee.employee_name,
            'employee_id_number': self.employee.employee_id_number,
            'department_id': self.department.id,
            'position': 'Operator',
            'absence_type': 'Emergency Leave',
            'from_date': '2026-04-06',
            'to_date': '2026-04-06',
            'is_partial_day': True,
            'reason': 'Flooded house, need to evacuate',
        }
        data.update(overrides)
        return data

    def test_submit_notifies_department_supervisor(self, django_capture_on_commit_callbacks):
        self.client.force_authenticate(user=UserFactory())

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(reverse('absence-list'), self._payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['days'] == 1

        calls = [c.args for c in publish.call_args_list]
        assert [channel for channel, _, _ in calls] == ['notifications', f'supervisor.{self.supervisor.id}']
        for _, event_name, message in calls:
            assert event_name == 'AbsenceRequested'
            assert message['absence_id'] == response.data['id']
            assert message['status'] == 'pending'
            assert message['is_partial_day'] is True

        notification = Notification.objects.get(subject_kind='absence')
        assert notification.recipient_id == self.supervisor.id
        assert notification.notification_type == 'absence_request'

    def test_short_reason_is_rejected(self):
        self.client.force_authenticate(user=UserFactory())
        response = self.client.post(reverse('absence-list'), self._payload(reason='sick'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'reason' in response.data

    def test_supervisor_rejects_absence(self, django_capture_on_commit_callbacks):
        absence = AbsenceFactory(employee=self.employee)
        self.client.force_authenticate(user=self.supervisor)

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(
                    reverse('absence-update-status', args=[absence.id]),
                    {'status': 'rejected', 'approval_comments': 'Missing certificate'},
                    format='json',
                )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'rejected'
        assert response.data['approved_by'] == self.supervisor.id

        _, event_name, message = publish.call_args.args
        assert event_name == 'RequestStatusUpdated'
        assert message['request_type'] == 'absence'
        assert message['approved_by'] == self.supervisor.full_name
        assert message['approval_comments'] == 'Missing certificate'

    def test_regular_employee_cannot_review(self):
        absence = AbsenceFactory(employee=self.employee)
        self.client.force_authenticate(user=UserFactory())

        response = self.client.post(
            reverse('absence-update-status', args=[absence.id]),
            {'status': 'approved'},
            format='json',
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_credits_for_supervised_employees(self):
        self.client.force_authenticate(user=self.supervisor)
        outsider = EmployeeFactory()

        response = self.client.get(reverse('absence-credits'), {'employee': self.employee.id})
        assert response.status_code == status.HTTP_200_OK
        assert response.data['remaining_credits'] == 12

        response = self.client.get(reverse('absence-credits'), {'employee': outsider.id})
        assert response.status_code == status.HTTP_404_NOT_FOUND
