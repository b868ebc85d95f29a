from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from hris.apps.notifications.models import Notification
from hris.apps.notifications.services.transport import ChannelLayerTransport
from hris.apps.resume_to_work.models import ResumeToWork
from tests.fixtures.factories import EmployeeFactory, ResumeToWorkFactory, SupervisorDepartmentFactory, UserFactory


@pytest.mark.django_db
class TestResumeToWorkAPI:

    def setup_method(self):
        self.client = APIClient()
        self.assignment = SupervisorDepartmentFactory()
        self.supervisor = self.assignment.user
        self.employee = EmployeeFactory(department=self.assignment.department)
        self.hr_admin = UserFactory(role='hr_admin', first_name='Hana', last_name='Cruz')

    def test_submit_notifies_supervisor(self, django_capture_on_commit_callbacks):
        self.client.force_authenticate(user=UserFactory())

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(
                    reverse('resume-to-work-list'),
                    {'employee_id': self.employee.id, 'return_date': '2026-04-09',
                     'previous_absence_reference': 'Sick Leave 2026-04-06'},
                    format='json',
                )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'pending'

        calls = [c.args for c in publish.call_args_list]
        assert [channel for channel, _, _ in calls] == ['notifications', f'supervisor.{self.supervisor.id}']
        assert {event_name for _, event_name, _ in calls} == {'ReturnWorkRequested'}
        assert calls[0][2]['return_date'] == '2026-04-09'

        notification = Notification.objects.get()
        assert notification.notification_type == 'resume_to_work'
        assert notification.recipient_id == self.supervisor.id

    def test_hr_admin_processes_form(self, django_capture_on_commit_callbacks):
        resume = ResumeToWorkFactory(employee=self.employee)
        self.client.force_authenticate(user=self.hr_admin)

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(reverse('resume-to-work-process', args=[resume.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'processed'
        assert response.data['processed_by_name'] == 'Hana Cruz'

        calls = [c.args for c in publish.call_args_list]
        assert {event_name for _, event_name, _ in calls} == {'ReturnWorkProcessed'}
        assert calls[0][2]['processed_by'] == 'Hana Cruz'
        assert calls[0][2]['processed_at'] is not None

        notification = Notification.objects.get(notification_type='employee_returned')
        assert notification.recipient_id is None

    def test_supervisor_cannot_process(self, django_capture_on_commit_callbacks):
        resume = ResumeToWorkFactory(employee=self.employee)
        self.client.force_authenticate(user=self.supervisor)

        with patch.object(ChannelLayerTransport, 'publish') as publish:
            with django_capture_on_commit_callbacks(execute=True):
                response = self.client.post(reverse('resume-to-work-process', args=[resume.id]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        resume.refresh_from_db()
        assert resume.status == ResumeToWork.ResumeStatus.PENDING
        publish.assert_not_called()

    def test_processing_twice_is_rejected(self):
        resume = ResumeToWorkFactory(employee=self.employee)
        resume.mark_processed(self.hr_admin)
        self.client.force_authenticate(user=self.hr_admin)

        response = self.client.post(reverse('resume-to-work-process', args=[resume.id]))

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_supervisor_marks_notified(self):
        resume = ResumeToWorkFactory(employee=self.employee)
        self.client.force_authenticate(user=self.supervisor)

        response = self.client.post(reverse('resume-to-work-supervisor-notified', args=[resume.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['supervisor_notified'] is True
        assert response.data['supervisor_notified_at'] is not None
