from abc import ABC, abstractmethod
from typing import Iterable

from hris.apps.employees.models import Employee


class EmployeeRepository(ABC):
    @abstractmethod
    def get_by_id(self, employee_id: int) -> Employee:
        pass

    @abstractmethod
    def visible_to(self, department_ids: Iterable[int]):
        pass
