from rest_framework import viewsets

from hris.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from hris.apps.employees.models import Employee
from hris.apps.common.scoping import visible_department_ids
from .serializers import EmployeeSerializer


class EmployeeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Справочник сотрудников.

    Руководитель видит только сотрудников своих подразделений.
    """
    serializer_class = EmployeeSerializer

    def get_queryset(self):
        department_ids = visible_department_ids(self.request.user)
        if department_ids is None:
            qs = Employee.objects.select_related('department')
        else:
            qs = EmployeeRepositoryImpl().visible_to(department_ids)

        department = self.request.query_params.get('department')
        if department:
            qs = qs.filter(department_id=department)
        return qs
