from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from hris.apps.departments.application.services import SupervisorAssignmentService
from hris.apps.departments.models import Department
from .serializers import DepartmentSerializer


class DepartmentViewSet(viewsets.ReadOnlyModelViewSet):
    """Справочник подразделений с назначенными руководителями"""
    queryset = Department.objects.prefetch_related('supervisor_assignments__user')
    serializer_class = DepartmentSerializer

    @extend_schema(
        summary="Подразделения текущего руководителя",
        description="Возвращает подразделения, на которые назначен текущий пользователь"
    )
    @action(detail=False, methods=['get'])
    def supervised(self, request: Request) -> Response:
        ids = SupervisorAssignmentService().get_supervised_department_ids(request.user)
        serializer = self.get_serializer(self.get_queryset().filter(id__in=ids), many=True)
        return Response(serializer.data)
