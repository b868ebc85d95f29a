from typing import List, Optional

from hris.apps.departments.domain.repositories import SupervisorAssignmentRepository
from hris.apps.departments.models import SupervisorDepartment


class SupervisorAssignmentRepositoryImpl(SupervisorAssignmentRepository):
    def _active_assignments(self):
        return SupervisorDepartment.objects.filter(can_evaluate=True, user__is_active=True)

    def find_supervisor_id(self, department_id: int) -> Optional[int]:
        # При нескольких назначениях побеждает самое раннее
        return (
            self._active_assignments()
            .filter(department_id=department_id)
            .order_by('id')
            .values_list('user_id', flat=True)
            .first()
        )

    def list_department_ids(self, user_id: int) -> List[int]:
        return list(
            self._active_assignments()
            .filter(user_id=user_id)
            .order_by('department_id')
            .values_list('department_id', flat=True)
        )
