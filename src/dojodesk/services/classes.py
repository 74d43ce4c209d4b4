"""Class timetable maintenance."""

from __future__ import annotations

from ..domain.repositories import TrainingClassRepository
from ..errors import NotFound, ValidationError
from ..models.training_class import TrainingClass
from . import validation


def _clean(training_class: TrainingClass) -> None:
    training_class.name = validation.require_text(training_class.name, "Class name")
    training_class.schedule = validation.require_text(training_class.schedule, "Schedule")
    training_class.description = (training_class.description or "").strip()
    if training_class.max_capacity is None or int(training_class.max_capacity) <= 0:
        raise ValidationError("Maximum capacity must be a positive number.")
    training_class.max_capacity = int(training_class.max_capacity)


def create_class(
    *,
    name: str,
    schedule: str,
    max_capacity: int,
    description: str = "",
    active: bool = True,
    classes: TrainingClassRepository,
) -> TrainingClass:
    training_class = TrainingClass(
        name=name,
        schedule=schedule,
        max_capacity=max_capacity,
        description=description,
        active=active,
    )
    _clean(training_class)
    return classes.create(training_class)


def get_class(class_id: int, *, classes: TrainingClassRepository) -> TrainingClass:
    validation.ensure_positive_id(class_id, "Class id")
    training_class = classes.get_by_id(class_id)
    if training_class is None:
        raise NotFound("Class", class_id)
    return training_class


def list_classes(
    *, classes: TrainingClassRepository, active_only: bool = False
) -> list[TrainingClass]:
    return classes.list_all(active_only=active_only)


def update_class(training_class: TrainingClass, *, classes: TrainingClassRepository) -> TrainingClass:
    if training_class.id is None:
        raise ValidationError("Class id is required for an update.")
    get_class(training_class.id, classes=classes)
    _clean(training_class)
    return classes.update(training_class)


def _set_active(class_id: int, active: bool, classes: TrainingClassRepository) -> TrainingClass:
    training_class = get_class(class_id, classes=classes)
    if training_class.active == active:
        return training_class
    training_class.active = active
    return classes.update(training_class)


def activate_class(class_id: int, *, classes: TrainingClassRepository) -> TrainingClass:
    return _set_active(class_id, True, classes)


def deactivate_class(class_id: int, *, classes: TrainingClassRepository) -> TrainingClass:
    return _set_active(class_id, False, classes)
