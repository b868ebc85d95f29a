import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from tests.fixtures.factories import EmployeeFactory, SupervisorDepartmentFactory, UserFactory


@pytest.mark.django_db
class TestEmployeeAPI:

    def setup_method(self):
        self.client = APIClient()
        self.assignment = SupervisorDepartmentFactory()
        self.own = EmployeeFactory(department=self.assignment.department)
        self.outsider = EmployeeFactory()

    def test_hr_admin_sees_everyone(self):
        self.client.force_authenticate(user=UserFactory(role='hr_admin'))
        response = self.client.get(reverse('employee-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_supervisor_sees_own_department(self):
        self.client.force_authenticate(user=self.assignment.user)
        response = self.client.get(reverse('employee-list'))

        assert [item['id'] for item in response.data['results']] == [self.own.id]
        assert response.data['results'][0]['department_name'] == self.assignment.department.name

    def test_filter_by_department(self):
        self.client.force_authenticate(user=UserFactory(role='manager'))
        response = self.client.get(reverse('employee-list'), {'department': self.outsider.department_id})

        assert [item['id'] for item in response.data['results']] == [self.outsider.id]
