"""
Сервисный слой для форм возвращения на работу
"""
from datetime import date
from typing import Optional
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from hris.apps.employees.domain.repositories import EmployeeRepository
from hris.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from hris.apps.employees.models import Employee
from hris.apps.notifications import payloads
from hris.apps.notifications.dispatch import emit_on_commit
from hris.apps.resume_to_work.models import ResumeToWork

logger = logging.getLogger(__name__)


class ResumeToWorkService:
    """
    Подача формы, обработка кадровиком и отметка об уведомлении
    руководителя.
    """

    def __init__(self, employee_repository: Optional[EmployeeRepository] = None):
        self.employee_repository = employee_repository or EmployeeRepositoryImpl()

    @transaction.atomic
    def submit(
        self,
        employee_id: int,
        return_date: date,
        previous_absence_reference: Optional[str] = None,
        comments: Optional[str] = None,
    ) -> ResumeToWork:
        try:
            employee = self.employee_repository.get_by_id(employee_id)
        except Employee.DoesNotExist:
            raise ValidationError({'employee_id': f"Employee {employee_id} does not exist."})

        resume = ResumeToWork.objects.create(
            employee=employee,
            return_date=return_date,
            previous_absence_reference=previous_absence_reference or "",
            comments=comments or "",
            status=ResumeToWork.ResumeStatus.PENDING,
        )
        logger.info("Resume to work form created: id=%s employee_id=%s", resume.id, employee.id)

        emit_on_commit(payloads.return_work_requested(resume))
        return resume

    @transaction.atomic
    def process(self, resume_id: int, user) -> ResumeToWork:
        """
        Обработка формы кадровиком.

        Raises:
            PermissionDenied: пользователь не кадровик и не суперадмин
            ValidationError: форма не найдена или уже обработана
        """
        if not user.can_process_returns():
            raise PermissionDenied("Only HR admins can process resume to work forms.")

        try:
            resume = ResumeToWork.objects.select_for_update().select_related('employee__department').get(pk=resume_id)
        except ResumeToWork.DoesNotExist:
            raise ValidationError({'resume_id': f"Resume to work form {resume_id} does not exist."})

        if resume.is_processed:
            raise ValidationError({'status': "Resume to work form is already processed."})

        resume.mark_processed(user)
        logger.info("Resume to work form processed: id=%s by user %s", resume.id, user.id)

        emit_on_commit(payloads.return_work_processed(resume))
        return resume

    def mark_supervisor_notified(self, resume_id: int) -> ResumeToWork:
        try:
            resume = ResumeToWork.objects.get(pk=resume_id)
        except ResumeToWork.DoesNotExist:
            raise ValidationError({'resume_id': f"Resume to work form {resume_id} does not exist."})
        resume.mark_supervisor_notified()
        return resume
