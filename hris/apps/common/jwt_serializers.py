"""
Кастомные JWT serializers для включения роли и подразделений в токен
"""
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from hris.apps.departments.application.services import SupervisorAssignmentService


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Добавляет в токен роль пользователя и список подразделений,
    которые он курирует. Фронтенд по ним решает, подписываться ли
    на приватный канал руководителя.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        token['username'] = user.username
        token['full_name'] = user.full_name
        token['role'] = user.role
        token['is_superuser'] = user.is_superuser

        supervised = SupervisorAssignmentService().get_supervised_department_ids(user)
        token['supervised_department_ids'] = supervised
        token['is_supervisor'] = bool(supervised)

        return token
