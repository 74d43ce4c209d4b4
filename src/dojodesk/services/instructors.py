"""Instructor records: the senseis and coaches who run classes."""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..domain.repositories import InstructorRepository
from ..errors import NotFound, ValidationError
from ..logging_config import get_logger
from ..models.instructor import Instructor
from . import validation

logger = get_logger("instructors")


def _clean(instructor: Instructor, *, today: Optional[date]) -> None:
    instructor.full_name = validation.require_text(instructor.full_name, "Full name")
    instructor.dni = validation.normalize_dni(instructor.dni)
    instructor.birth_date = validation.ensure_not_future(
        instructor.birth_date, "Birth date", today=today
    )
    instructor.hired_on = validation.ensure_not_future(instructor.hired_on, "Hire date", today=today)
    instructor.email = validation.validate_email(instructor.email, optional=True)
    instructor.address = (instructor.address or "").strip()
    instructor.phone = (instructor.phone or "").strip()


def _ensure_unique_dni(instructor: Instructor, repo: InstructorRepository) -> None:
    existing = repo.get_by_dni(instructor.dni)
    if existing is not None and existing.id != instructor.id:
        raise ValidationError(f"An instructor with DNI {instructor.dni} already exists.")


def register_instructor(
    *,
    full_name: str,
    dni: str,
    birth_date: Optional[date],
    hired_on: Optional[date],
    address: str = "",
    phone: str = "",
    email: Optional[str] = None,
    active: bool = True,
    instructors: InstructorRepository,
    today: Optional[date] = None,
) -> Instructor:
    instructor = Instructor(
        full_name=full_name,
        dni=dni,
        birth_date=birth_date,
        hired_on=hired_on,
        address=address,
        phone=phone,
        email=email,
        active=active,
    )
    _clean(instructor, today=today)
    _ensure_unique_dni(instructor, instructors)
    created = instructors.create(instructor)
    logger.info("Instructor registered", extra={"instructor_id": created.id})
    return created


def get_instructor(instructor_id: int, *, instructors: InstructorRepository) -> Instructor:
    validation.ensure_positive_id(instructor_id, "Instructor id")
    instructor = instructors.get_by_id(instructor_id)
    if instructor is None:
        raise NotFound("Instructor", instructor_id)
    return instructor


def list_instructors(
    *, instructors: InstructorRepository, active_only: bool = False
) -> list[Instructor]:
    return instructors.list_all(active_only=active_only)


def update_instructor(
    instructor: Instructor, *, instructors: InstructorRepository, today: Optional[date] = None
) -> Instructor:
    if instructor.id is None:
        raise ValidationError("Instructor id is required for an update.")
    get_instructor(instructor.id, instructors=instructors)
    _clean(instructor, today=today)
    _ensure_unique_dni(instructor, instructors)
    return instructors.update(instructor)


def _set_active(instructor_id: int, active: bool, repo: InstructorRepository) -> Instructor:
    instructor = get_instructor(instructor_id, instructors=repo)
    if instructor.active == active:
        return instructor
    instructor.active = active
    return repo.update(instructor)


def deactivate_instructor(instructor_id: int, *, instructors: InstructorRepository) -> Instructor:
    return _set_active(instructor_id, False, instructors)


def activate_instructor(instructor_id: int, *, instructors: InstructorRepository) -> Instructor:
    return _set_active(instructor_id, True, instructors)
