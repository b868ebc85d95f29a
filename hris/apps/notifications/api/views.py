from typing import Optional

from django.db.models import Q
from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from hris.apps.notifications.models import Notification
from .serializers import NotificationSerializer


class NotificationViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet для входящих уведомлений текущего пользователя.

    Пользователь видит адресованные ему уведомления и общие
    (без получателя). Поддерживает пометку уведомлений как прочитанных.
    """
    serializer_class = NotificationSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Notification.objects.filter(
            Q(recipient=self.request.user) | Q(recipient__isnull=True)
        )

    @extend_schema(
        summary="Получить непрочитанные уведомления",
        description="Возвращает список всех непрочитанных уведомлений текущего пользователя"
    )
    @action(detail=False, methods=['get'])
    def unread(self, request: Request) -> Response:
        queryset = self.get_queryset().filter(read_at__isnull=True)
        serializer = self.get_serializer(queryset, many=True)
        return Response({'count': queryset.count(), 'results': serializer.data})

    @extend_schema(
        summary="Пометить уведомление как прочитанное",
        parameters=[
            OpenApiParameter(
                name='id',
                type=OpenApiTypes.INT,
                location=OpenApiParameter.PATH,
                description='ID уведомления'
            )
        ]
    )
    @action(detail=True, methods=['post'])
    def mark_read(self, request: Request, pk: Optional[int] = None) -> Response:
        notification = self.get_object()
        notification.mark_read()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary="Пометить все уведомления как прочитанные",
        description="Помечает все уведомления текущего пользователя как прочитанные"
    )
    @action(detail=False, methods=['post'])
    def mark_all_read(self, request: Request) -> Response:
        self.get_queryset().filter(read_at__isnull=True).update(read_at=timezone.now())
        return Response(status=status.HTTP_204_NO_CONTENT)
