"""
Построение доменных событий из записей заявок.

Снимок всегда плоский: идентификаторы, даты в ISO-формате,
человекочитаемые имена и статус. Вложенная копия заявки не
передается.
"""
from datetime import date, datetime
from typing import Any, Dict, Optional

from hris.apps.notifications.domain.events import DomainEvent, EventType, SubjectKind


def iso_date(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def iso_datetime(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _employee_fields(employee) -> Dict[str, Any]:
    if employee is None:
        return {}
    return {
        'employee_id': employee.id,
        'employee_id_number': employee.employee_id_number,
        'employee_name': employee.employee_name,
        'department': employee.department.name,
        'position': employee.position,
        'picture': employee.picture or None,
    }


def leave_snapshot(leave) -> Dict[str, Any]:
    snapshot = _employee_fields(leave.employee)
    snapshot.update({
        'leave_id': leave.id,
        'leave_type': leave.leave_type,
        'leave_start_date': iso_date(leave.leave_start_date),
        'leave_end_date': iso_date(leave.leave_end_date),
        'leave_days': leave.leave_days,
        'leave_reason': leave.leave_reason,
        'leave_date_reported': iso_date(leave.leave_date_reported),
        'status': leave.leave_status,
    })
    return snapshot


def absence_snapshot(absence) -> Dict[str, Any]:
    snapshot = _employee_fields(absence.employee)
    # Заявка может быть подана без карточки сотрудника
    snapshot.update({
        'absence_id': absence.id,
        'full_name': absence.full_name,
        'employee_name': snapshot.get('employee_name', absence.full_name),
        'employee_id_number': absence.employee_id_number,
        'department': absence.department.name,
        'position': absence.position,
        'absence_type': absence.absence_type,
        'from_date': iso_date(absence.from_date),
        'to_date': iso_date(absence.to_date),
        'submitted_at': iso_datetime(absence.submitted_at),
        'days': absence.days,
        'reason': absence.reason,
        'is_partial_day': absence.is_partial_day,
        'status': absence.status,
    })
    return snapshot


def resume_to_work_snapshot(resume) -> Dict[str, Any]:
    snapshot = _employee_fields(resume.employee)
    snapshot.update({
        'resume_id': resume.id,
        'return_date': iso_date(resume.return_date),
        'previous_absence_reference': resume.previous_absence_reference,
        'comments': resume.comments,
        'status': resume.status,
    })
    return snapshot


def leave_requested(leave) -> DomainEvent:
    return DomainEvent(
        type=EventType.REQUEST_CREATED,
        subject_id=leave.id,
        subject_kind=SubjectKind.LEAVE,
        payload=leave_snapshot(leave),
        department_id=leave.employee.department_id,
    )


def absence_requested(absence) -> DomainEvent:
    return DomainEvent(
        type=EventType.REQUEST_CREATED,
        subject_id=absence.id,
        subject_kind=SubjectKind.ABSENCE,
        payload=absence_snapshot(absence),
        department_id=absence.department_id,
    )


def return_work_requested(resume) -> DomainEvent:
    return DomainEvent(
        type=EventType.REQUEST_CREATED,
        subject_id=resume.id,
        subject_kind=SubjectKind.RETURN_TO_WORK,
        payload=resume_to_work_snapshot(resume),
        department_id=resume.employee.department_id,
    )


def leave_status_updated(leave, previous_status: str) -> DomainEvent:
    payload = leave_snapshot(leave)
    payload.update({
        'request_type': SubjectKind.LEAVE.value,
        'request_id': leave.id,
        'previous_status': previous_status,
        'leave_date_approved': iso_date(leave.leave_date_approved),
        'comments': leave.leave_comments,
    })
    return DomainEvent(
        type=EventType.STATUS_CHANGED,
        subject_id=leave.id,
        subject_kind=SubjectKind.LEAVE,
        payload=payload,
        department_id=leave.employee.department_id,
    )


def absence_status_updated(absence, previous_status: str) -> DomainEvent:
    payload = absence_snapshot(absence)
    payload.update({
        'request_type': SubjectKind.ABSENCE.value,
        'request_id': absence.id,
        'previous_status': previous_status,
        'approved_at': iso_datetime(absence.approved_at),
        'approved_by': absence.approved_by.full_name if absence.approved_by else None,
        'approval_comments': absence.approval_comments,
    })
    return DomainEvent(
        type=EventType.STATUS_CHANGED,
        subject_id=absence.id,
        subject_kind=SubjectKind.ABSENCE,
        payload=payload,
        department_id=absence.department_id,
    )


def return_work_processed(resume) -> DomainEvent:
    payload = resume_to_work_snapshot(resume)
    payload.update({
        'processed_by': resume.processed_by.full_name if resume.processed_by else None,
        'processed_at': iso_datetime(resume.processed_at),
    })
    return DomainEvent(
        type=EventType.PROCESSED,
        subject_id=resume.id,
        subject_kind=SubjectKind.RETURN_TO_WORK,
        payload=payload,
        department_id=resume.employee.department_id,
    )
