from typing import Iterable

from hris.apps.employees.domain.repositories import EmployeeRepository
from hris.apps.employees.models import Employee


class EmployeeRepositoryImpl(EmployeeRepository):
    def get_by_id(self, employee_id: int) -> Employee:
        return Employee.objects.select_related('department').get(id=employee_id)

    def visible_to(self, department_ids: Iterable[int]):
        return Employee.objects.select_related('department').filter(department_id__in=list(department_ids))
