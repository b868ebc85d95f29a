"""
Сервис определения руководителей подразделений
"""
import logging
from typing import List, Optional

from hris.apps.departments.domain.repositories import SupervisorAssignmentRepository
from hris.apps.departments.infrastructure.repositories import SupervisorAssignmentRepositoryImpl

logger = logging.getLogger(__name__)


class SupervisorAssignmentService:
    """
    Явная проверка полномочий по таблице назначений вместо
    проверки ролей пользователя.
    """

    def __init__(self, repository: Optional[SupervisorAssignmentRepository] = None):
        self.repository = repository or SupervisorAssignmentRepositoryImpl()

    def get_supervisor_for_department(self, department_id: Optional[int]) -> Optional[int]:
        """
        Возвращает ID руководителя подразделения или None.

        Отсутствие руководителя не является ошибкой: вызывающий код
        в этом случае ограничивается общей рассылкой.
        """
        if department_id is None:
            return None
        supervisor_id = self.repository.find_supervisor_id(department_id)
        if supervisor_id is None:
            logger.warning("No supervisor found for department %s", department_id)
        return supervisor_id

    def get_supervised_department_ids(self, user) -> List[int]:
        if not user or not user.is_authenticated:
            return []
        return self.repository.list_department_ids(user.id)

    def is_supervisor(self, user) -> bool:
        return bool(self.get_supervised_department_ids(user))

    def is_supervisor_of(self, user, department_id: int) -> bool:
        return department_id in self.get_supervised_department_ids(user)
