"""Student registration and roster maintenance."""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..domain.repositories import StudentDirectory
from ..errors import NotFound, ValidationError
from ..logging_config import get_logger
from ..models.student import Student
from . import validation

logger = get_logger("students")


def _validated_fields(
    *,
    full_name: str,
    dni: str,
    birth_date: Optional[date],
    enrolled_on: Optional[date],
    email: Optional[str],
    today: Optional[date],
) -> dict:
    return {
        "full_name": validation.require_text(full_name, "Full name"),
        "dni": validation.normalize_dni(dni),
        "birth_date": validation.ensure_not_future(birth_date, "Birth date", today=today),
        "enrolled_on": validation.ensure_not_future(enrolled_on, "Enrollment date", today=today),
        "email": validation.validate_email(email, optional=True),
    }


def _ensure_unique_dni(dni: str, students: StudentDirectory, *, exclude_id: Optional[int] = None) -> None:
    existing = students.get_by_dni(dni)
    if existing is not None and existing.id != exclude_id:
        raise ValidationError(f"A student with DNI {dni} already exists.")


def register_student(
    *,
    full_name: str,
    dni: str,
    birth_date: Optional[date],
    enrolled_on: Optional[date],
    address: str = "",
    phone: str = "",
    email: Optional[str] = None,
    active: bool = True,
    students: StudentDirectory,
    today: Optional[date] = None,
) -> Student:
    """Validate and create a student."""

    fields = _validated_fields(
        full_name=full_name,
        dni=dni,
        birth_date=birth_date,
        enrolled_on=enrolled_on,
        email=email,
        today=today,
    )
    _ensure_unique_dni(fields["dni"], students)
    student = students.create(
        Student(
            **fields,
            address=(address or "").strip(),
            phone=(phone or "").strip(),
            active=active,
        )
    )
    logger.info("Student registered", extra={"student_id": student.id})
    return student


def get_student(student_id: int, *, students: StudentDirectory) -> Student:
    validation.ensure_positive_id(student_id, "Student id")
    student = students.get_by_id(student_id)
    if student is None:
        raise NotFound("Student", student_id)
    return student


def list_students(*, students: StudentDirectory, active_only: bool = False) -> list[Student]:
    return students.list_all(active_only=active_only)


def update_student(
    student: Student, *, students: StudentDirectory, today: Optional[date] = None
) -> Student:
    """Re-validate an edited student and persist it."""

    if student.id is None:
        raise ValidationError("Student id is required for an update.")
    get_student(student.id, students=students)
    fields = _validated_fields(
        full_name=student.full_name,
        dni=student.dni,
        birth_date=student.birth_date,
        enrolled_on=student.enrolled_on,
        email=student.email,
        today=today,
    )
    _ensure_unique_dni(fields["dni"], students, exclude_id=student.id)
    for key, value in fields.items():
        setattr(student, key, value)
    return students.update(student)


def _set_active(student_id: int, active: bool, students: StudentDirectory) -> Student:
    student = get_student(student_id, students=students)
    if student.active == active:
        return student
    student.active = active
    updated = students.update(student)
    logger.info(
        "Student activated" if active else "Student deactivated",
        extra={"student_id": student_id},
    )
    return updated


def deactivate_student(student_id: int, *, students: StudentDirectory) -> Student:
    """Mark a student as no longer attending. Already inactive is a no-op."""

    return _set_active(student_id, False, students)


def activate_student(student_id: int, *, students: StudentDirectory) -> Student:
    return _set_active(student_id, True, students)
