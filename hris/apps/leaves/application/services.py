"""
Сервисный слой для заявок на отпуск
"""
from datetime import date
from typing import Optional
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from hris.apps.employees.domain.repositories import EmployeeRepository
from hris.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from hris.apps.employees.models import Employee
from hris.apps.leaves.models import Leave, LeaveCredit
from hris.apps.notifications import payloads
from hris.apps.notifications.dispatch import emit_on_commit

logger = logging.getLogger(__name__)


class LeaveApplicationService:
    """Сервис подачи и согласования отпусков"""

    def __init__(self, employee_repository: Optional[EmployeeRepository] = None):
        self.employee_repository = employee_repository or EmployeeRepositoryImpl()

    @transaction.atomic
    def submit_leave(
        self,
        employee_id: int,
        leave_type: str,
        leave_start_date: date,
        leave_end_date: date,
        leave_days: int,
        leave_reason: str,
        leave_date_reported: date,
        leave_comments: str = "",
    ) -> Leave:
        """
        Создание заявки на отпуск в статусе "pending"

        Args:
            employee_id: ID сотрудника
            leave_type: Вид отпуска
            leave_start_date: Дата начала
            leave_end_date: Дата окончания
            leave_days: Количество дней (= количество кредитов)
            leave_reason: Причина
            leave_date_reported: Дата подачи
            leave_comments: Комментарий

        Returns:
            Leave: Созданная заявка

        Raises:
            ValidationError: сотрудник не найден, некорректный период
                или недостаточно кредитов
        """
        try:
            employee = self.employee_repository.get_by_id(employee_id)
        except Employee.DoesNotExist:
            raise ValidationError({'employee_id': f"Employee {employee_id} does not exist."})

        if leave_end_date < leave_start_date:
            raise ValidationError({'leave_end_date': "End date must be on or after the start date."})
        if leave_days < 1:
            raise ValidationError({'leave_days': "Leave must be at least one day."})

        credits = LeaveCredit.get_or_create_for_employee(employee.id)
        if credits.remaining_credits < leave_days:
            raise ValidationError({
                'leave_days': (
                    f"Insufficient leave credits. Employee has {credits.remaining_credits} credits "
                    f"remaining but requesting {leave_days} days ({leave_days} credits)."
                )
            })

        leave = Leave.objects.create(
            employee=employee,
            leave_type=leave_type,
            leave_start_date=leave_start_date,
            leave_end_date=leave_end_date,
            leave_days=leave_days,
            leave_reason=leave_reason,
            leave_date_reported=leave_date_reported,
            leave_comments=leave_comments or "",
            leave_status=Leave.LeaveStatus.PENDING,
        )
        logger.info("Leave created: id=%s employee_id=%s", leave.id, employee.id)

        emit_on_commit(payloads.leave_requested(leave))
        return leave

    @transaction.atomic
    def update_status(
        self,
        leave_id: int,
        new_status: str,
        comments: Optional[str] = None,
        date_approved: Optional[date] = None,
    ) -> Leave:
        """
        Смена статуса заявки с учетом кредитов.

        Одобрение списывает кредиты, уход из статуса "approved" возвращает их.
        Событие рассылается только при фактической смене статуса.
        """
        if new_status not in Leave.LeaveStatus.values:
            raise ValidationError({'leave_status': f"Unknown status: {new_status}"})

        try:
            leave = Leave.objects.select_for_update().select_related('employee__department').get(pk=leave_id)
        except Leave.DoesNotExist:
            raise ValidationError({'leave_id': f"Leave {leave_id} does not exist."})

        old_status = leave.leave_status
        leave.leave_status = new_status
        if comments is not None:
            leave.leave_comments = comments
        if new_status in (Leave.LeaveStatus.APPROVED, Leave.LeaveStatus.REJECTED):
            leave.leave_date_approved = date_approved or timezone.localdate()
        leave.save()

        credits = LeaveCredit.get_or_create_for_employee(leave.employee_id)
        if new_status == Leave.LeaveStatus.APPROVED and old_status != Leave.LeaveStatus.APPROVED:
            credits.use_credits(leave.leave_days)
        elif old_status == Leave.LeaveStatus.APPROVED and new_status != Leave.LeaveStatus.APPROVED:
            credits.refund_credits(leave.leave_days)

        if old_status != new_status:
            emit_on_commit(payloads.leave_status_updated(leave, previous_status=old_status))

        return leave
