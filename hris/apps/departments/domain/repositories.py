from abc import ABC, abstractmethod
from typing import List, Optional


class SupervisorAssignmentRepository(ABC):
    @abstractmethod
    def find_supervisor_id(self, department_id: int) -> Optional[int]:
        pass

    @abstractmethod
    def list_department_ids(self, user_id: int) -> List[int]:
        pass
