"""
Сервисный слой для заявок на отсутствие
"""
from datetime import date
from typing import Optional
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from hris.apps.absences.models import Absence, AbsenceCredit
from hris.apps.departments.models import Department
from hris.apps.employees.domain.repositories import EmployeeRepository
from hris.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from hris.apps.employees.models import Employee
from hris.apps.notifications import payloads
from hris.apps.notifications.dispatch import emit_on_commit

logger = logging.getLogger(__name__)

MIN_REASON_LENGTH = 10


class AbsenceApplicationService:

    def __init__(self, employee_repository: Optional[EmployeeRepository] = None):
        self.employee_repository = employee_repository or EmployeeRepositoryImpl()

    @transaction.atomic
    def submit_absence(
        self,
        full_name: str,
        employee_id_number: str,
        department_id: int,
        position: str,
        absence_type: str,
        from_date: date,
        to_date: date,
        reason: str,
        is_partial_day: bool = False,
        employee_id: Optional[int] = None,
    ) -> Absence:
        """
        Создание заявки на отсутствие в статусе "pending".

        Кредиты при подаче не проверяются, они списываются при одобрении.
        """
        employee = None
        if employee_id is not None:
            try:
                employee = self.employee_repository.get_by_id(employee_id)
            except Employee.DoesNotExist:
                raise ValidationError({'employee_id': f"Employee {employee_id} does not exist."})

        try:
            department = Department.objects.get(pk=department_id)
        except Department.DoesNotExist:
            raise ValidationError({'department': f"Department {department_id} does not exist."})

        if absence_type not in Absence.AbsenceType.values:
            raise ValidationError({'absence_type': f"Unknown absence type: {absence_type}"})
        if to_date < from_date:
            raise ValidationError({'to_date': "End date must be on or after the start date."})
        if len((reason or "").strip()) < MIN_REASON_LENGTH:
            raise ValidationError({'reason': f"Reason must be at least {MIN_REASON_LENGTH} characters."})

        absence = Absence.objects.create(
            employee=employee,
            full_name=full_name,
            employee_id_number=employee_id_number,
            department=department,
            position=position,
            absence_type=absence_type,
            from_date=from_date,
            to_date=to_date,
            is_partial_day=is_partial_day,
            reason=reason,
            status=Absence.AbsenceStatus.PENDING,
        )
        logger.info("Absence created: id=%s days=%s department=%s", absence.id, absence.days, department.id)

        emit_on_commit(payloads.absence_requested(absence))
        return absence

    @transaction.atomic
    def update_status(
        self,
        absence_id: int,
        new_status: str,
        approval_comments: Optional[str] = None,
        user=None,
    ) -> Absence:
        """
        Смена статуса заявки.

        Для "approved" и "rejected" фиксируются рассмотревший и время,
        при возврате в "pending" они сбрасываются. Кредиты списываются
        и возвращаются только для заявок с карточкой сотрудника.
        """
        if new_status not in Absence.AbsenceStatus.values:
            raise ValidationError({'status': f"Unknown status: {new_status}"})

        try:
            absence = (
                Absence.objects.select_for_update()
                .select_related('department', 'employee__department')
                .get(pk=absence_id)
            )
        except Absence.DoesNotExist:
            raise ValidationError({'absence_id': f"Absence {absence_id} does not exist."})

        old_status = absence.status
        reviewed = new_status in (Absence.AbsenceStatus.APPROVED, Absence.AbsenceStatus.REJECTED)
        absence.status = new_status
        absence.approved_at = timezone.now() if reviewed else None
        absence.approved_by = user if reviewed and user is not None and user.is_authenticated else None
        absence.approval_comments = approval_comments
        absence.save()

        if absence.employee_id is not None:
            credits = AbsenceCredit.get_or_create_for_employee(absence.employee_id)
            if new_status == Absence.AbsenceStatus.APPROVED and old_status != Absence.AbsenceStatus.APPROVED:
                credits.use_credits(absence.days)
            elif old_status == Absence.AbsenceStatus.APPROVED and new_status != Absence.AbsenceStatus.APPROVED:
                credits.refund_credits(absence.days)

        if old_status != new_status:
            emit_on_commit(payloads.absence_status_updated(absence, previous_status=old_status))

        return absence
