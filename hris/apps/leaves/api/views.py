from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.generics import get_object_or_404
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.request import Request
from rest_framework.response import Response

from hris.apps.common.exceptions import as_api_error
from hris.apps.common.scoping import can_review_department, visible_department_ids
from hris.apps.employees.models import Employee
from hris.apps.leaves.application.services import LeaveApplicationService
from hris.apps.leaves.models import Leave, LeaveCredit
from .serializers import LeaveCreateSerializer, LeaveCreditSerializer, LeaveSerializer, LeaveStatusSerializer


class LeaveViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    ViewSet для заявок на отпуск.

    Создание доступно любому авторизованному пользователю, список и
    рассмотрение ограничены подразделениями руководителя.
    """
    serializer_class = LeaveSerializer

    def get_queryset(self):
        qs = Leave.objects.select_related('employee__department')
        department_ids = visible_department_ids(self.request.user)
        if department_ids is not None:
            qs = qs.filter(employee__department_id__in=department_ids)

        leave_status = self.request.query_params.get('status')
        if leave_status:
            qs = qs.filter(leave_status=leave_status)
        return qs

    @extend_schema(request=LeaveCreateSerializer, responses={201: LeaveSerializer})
    def create(self, request: Request) -> Response:
        serializer = LeaveCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            leave = LeaveApplicationService().submit_leave(**serializer.validated_data)
        except DjangoValidationError as exc:
            raise as_api_error(exc)
        return Response(LeaveSerializer(leave).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Изменить статус заявки", request=LeaveStatusSerializer, responses=LeaveSerializer)
    @action(detail=True, methods=['post'], url_path='status')
    def update_status(self, request: Request, pk: Optional[int] = None) -> Response:
        leave = get_object_or_404(Leave.objects.select_related('employee'), pk=pk)
        if not can_review_department(request.user, leave.employee.department_id):
            raise PermissionDenied("You are not allowed to review leaves of this department.")

        serializer = LeaveStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            leave = LeaveApplicationService().update_status(
                leave.id,
                serializer.validated_data['leave_status'],
                comments=serializer.validated_data['leave_comments'],
                date_approved=serializer.validated_data['leave_date_approved'],
            )
        except DjangoValidationError as exc:
            raise as_api_error(exc)
        return Response(LeaveSerializer(leave).data)


    @extend_schema(
        summary="Баланс отпускных кредитов",
        description="Без параметра - балансы видимых сотрудников, с ?employee=<id> - баланс одного сотрудника",
        parameters=[OpenApiParameter(name='employee', type=OpenApiTypes.INT, required=False)],
        responses=LeaveCreditSerializer(many=True),
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
            balance = LeaveCredit.get_or_create_for_employee(employee.id)
            return Response(LeaveCreditSerializer(balance).data)

        balances = LeaveCredit.objects.filter(employee__in=employees).select_related('employee')
        return Response(LeaveCreditSerializer(balances, many=True).data)
