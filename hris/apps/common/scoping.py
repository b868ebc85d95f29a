"""
Область видимости данных по подразделениям
"""
from typing import List, Optional

from hris.apps.departments.application.services import SupervisorAssignmentService

UNRESTRICTED_ROLES = ('super_admin', 'hr_admin', 'manager')


def visible_department_ids(user) -> Optional[List[int]]:
    """
    Подразделения, данные которых видит пользователь.

    None означает отсутствие ограничений (суперадмин, кадровик, менеджер).
    Руководитель видит только курируемые подразделения, остальные - ничего.
    """
    if user.is_superuser or user.role in UNRESTRICTED_ROLES:
        return None
    return SupervisorAssignmentService().get_supervised_department_ids(user)


def can_review_department(user, department_id: int) -> bool:
    """Рассматривать заявки может руководитель подразделения или пользователь без ограничений"""
    department_ids = visible_department_ids(user)
    return department_ids is None or department_id in department_ids
