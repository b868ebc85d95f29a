from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.generics import get_object_or_404
from rest_framework.request import Request
from rest_framework.response import Response

from hris.apps.common.exceptions import as_api_error
from hris.apps.common.scoping import can_review_department, visible_department_ids
from hris.apps.resume_to_work.application.services import ResumeToWorkService
from hris.apps.resume_to_work.models import ResumeToWork
from .serializers import ResumeToWorkCreateSerializer, ResumeToWorkSerializer


class ResumeToWorkViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    ViewSet для форм возвращения на работу.

    Обработка формы доступна только кадровику или суперадмину,
    проверка прав выполняется в сервисе.
    """
    serializer_class = ResumeToWorkSerializer

    def get_queryset(self):
        qs = ResumeToWork.objects.select_related('employee__department', 'processed_by')
        department_ids = visible_department_ids(self.request.user)
        if department_ids is not None:
            qs = qs.filter(employee__department_id__in=department_ids)
        return qs

    @extend_schema(request=ResumeToWorkCreateSerializer, responses={201: ResumeToWorkSerializer})
    def create(self, request: Request) -> Response:
        serializer = ResumeToWorkCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            resume = ResumeToWorkService().submit(**serializer.validated_data)
        except DjangoValidationError as exc:
            raise as_api_error(exc)
        return Response(ResumeToWorkSerializer(resume).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Обработать форму возвращения на работу", request=None, responses=ResumeToWorkSerializer)
    @action(detail=True, methods=['post'])
    def process(self, request: Request, pk: Optional[int] = None) -> Response:
        resume = get_object_or_404(ResumeToWork, pk=pk)
        try:
            resume = ResumeToWorkService().process(resume.id, request.user)
        except DjangoValidationError as exc:
            raise as_api_error(exc)
        return Response(ResumeToWorkSerializer(resume).data)

    @extend_schema(summary="Отметить, что руководитель уведомлен", request=None, responses=ResumeToWorkSerializer)
    @action(detail=True, methods=['post'], url_path='supervisor-notified')
    def supervisor_notified(self, request: Request, pk: Optional[int] = None) -> Response:
        resume = get_object_or_404(ResumeToWork.objects.select_related('employee'), pk=pk)
        if not can_review_department(request.user, resume.employee.department_id):
            raise PermissionDenied("You are not allowed to update forms of this department.")
        resume = ResumeToWorkService().mark_supervisor_notified(resume.id)
        return Response(ResumeToWorkSerializer(resume).data)
