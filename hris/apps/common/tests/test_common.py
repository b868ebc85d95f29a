import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import RequestFactory, override_settings

from hris.apps.common.exceptions import as_api_error
from hris.apps.common.middleware import get_client_ip
from hris.apps.common.scoping import can_review_department, visible_department_ids
from hris.apps.leaves.models import LeaveCredit
from tests.fixtures.factories import EmployeeFactory, SupervisorDepartmentFactory, UserFactory


class TestAsApiError:

    def test_field_errors(self):
        error = as_api_error(DjangoValidationError({'leave_days': 'Not enough credits'}))
        assert error.detail == {'leave_days': ['Not enough credits']}

    def test_plain_message(self):
        error = as_api_error(DjangoValidationError('Broken'))
        assert error.detail == {'non_field_errors': ['Broken']}


class TestClientIp:

    def test_forwarded_for_wins(self):
        request = RequestFactory().get('/', HTTP_X_FORWARDED_FOR='10.0.0.5, 172.16.0.1')
        assert get_client_ip(request) == '10.0.0.5'

    def test_remote_addr(self):
        request = RequestFactory().get('/', REMOTE_ADDR='192.168.1.20')
        assert get_client_ip(request) == '192.168.1.20'


@pytest.mark.django_db
class TestScoping:

    def test_unrestricted_roles(self):
        for role in ('super_admin', 'hr_admin', 'manager'):
            assert visible_department_ids(UserFactory(role=role)) is None
        assert visible_department_ids(UserFactory(is_superuser=True)) is None

    def test_supervisor_is_limited_to_assignments(self):
        assignment = SupervisorDepartmentFactory()
        assert visible_department_ids(assignment.user) == [assignment.department_id]
        assert can_review_department(assignment.user, assignment.department_id)
        assert not can_review_department(assignment.user, assignment.department_id + 1)

    def test_employee_sees_nothing(self):
        assert visible_department_ids(UserFactory()) == []


@pytest.mark.django_db
class TestCreditBalance:

    @override_settings(HRIS_DEFAULT_LEAVE_CREDITS=5)
    def test_default_allowance(self):
        credits = LeaveCredit.get_or_create_for_employee(EmployeeFactory().id)
        assert credits.total_credits == 5
        assert credits.remaining_credits == 5

    def test_use_and_refund(self):
        credits = LeaveCredit.get_or_create_for_employee(EmployeeFactory().id)
        credits.use_credits(4)
        assert credits.used_credits == 4
        credits.refund_credits(10)
        assert credits.used_credits == 0
