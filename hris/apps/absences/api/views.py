from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.generics import get_object_or_404
from rest_framework.request import Request
from rest_framework.response import Response

from hris.apps.absences.application.services import AbsenceApplicationService
from hris.apps.absences.models import Absence, AbsenceCredit
from hris.apps.common.exceptions import as_api_error
from hris.apps.common.scoping import can_review_department, visible_department_ids
from hris.apps.employees.models import Employee
from .serializers import (
    AbsenceCreateSerializer,
    AbsenceCreditSerializer,
    AbsenceSerializer,
    AbsenceStatusSerializer,
)


class AbsenceViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    ViewSet для заявок на отсутствие.

    Подразделение заявки хранится в ней самой, поэтому область видимости
    руководителя проверяется по ``Absence.department``.
    """
    serializer_class = AbsenceSerializer

    def get_queryset(self):
        qs = Absence.objects.select_related('department', 'employee__department', 'approved_by')
        department_ids = visible_department_ids(self.request.user)
        if department_ids is not None:
            qs = qs.filter(department_id__in=department_ids)

        absence_status = self.request.query_params.get('status')
        if absence_status:
            qs = qs.filter(status=absence_status)
        return qs

    @extend_schema(request=AbsenceCreateSerializer, responses={201: AbsenceSerializer})
    def create(self, request: Request) -> Response:
        serializer = AbsenceCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            absence = AbsenceApplicationService().submit_absence(**serializer.validated_data)
        except DjangoValidationError as exc:
            raise as_api_error(exc)
        return Response(AbsenceSerializer(absence).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Рассмотреть заявку на отсутствие", request=AbsenceStatusSerializer, responses=AbsenceSerializer)
    @action(detail=True, methods=['post'], url_path='status')
    def update_status(self, request: Request, pk: Optional[int] = None) -> Response:
        absence = get_object_or_404(Absence, pk=pk)
        if not can_review_department(request.user, absence.department_id):
            raise PermissionDenied("You are not allowed to review absences of this department.")

        serializer = AbsenceStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            absence = AbsenceApplicationService().update_status(
                absence.id,
                serializer.validated_data['status'],
                approval_comments=serializer.validated_data['approval_comments'],
                user=request.user,
            )
        except DjangoValidationError as exc:
            raise as_api_error(exc)
        return Response(AbsenceSerializer(absence).data)

    @extend_schema(
        summary="Баланс кредитов отсутствия",
        parameters=[OpenApiParameter(name='employee', type=OpenApiTypes.INT, required=False)],
        responses=AbsenceCreditSerializer(many=True),
    )
    @action(detail=False, methods=['get'])
    def credits(self, request: Request) -> Response:
        department_ids = visible_department_ids(request.user)
        employees = Employee.objects.all()
        if department_ids is not None:
            employees = employees.filter(department_id__in=department_ids)

        employee_id = request.query_params.get('employee')
        if employee_id:
            employee = get_object_or_404(employees, pk=employee_id)
            balance = AbsenceCredit.get_or_create_for_employee(employee.id)
            return Response(AbsenceCreditSerializer(balance).data)

        balances = AbsenceCredit.objects.filter(employee__in=employees).select_related('employee')
        return Response(AbsenceCreditSerializer(balances, many=True).data)
