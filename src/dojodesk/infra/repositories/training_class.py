"""SQLModel implementation of TrainingClass repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.training_class import TrainingClass


class SQLModelTrainingClassRepository:
    """SQLModel-based class repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, class_id: int) -> Optional[TrainingClass]:
        """Retrieve a class by ID."""
        with self.session_factory() as session:
            return session.get(TrainingClass, class_id)

    def list_all(self, *, active_only: bool = False) -> list[TrainingClass]:
        """List classes ordered by name."""
        with self.session_factory() as session:
            statement = select(TrainingClass)
            if active_only:
                statement = statement.where(TrainingClass.active == True)  # noqa: E712
            statement = statement.order_by(TrainingClass.name)  # type: ignore
            return list(session.exec(statement).all())

    def create(self, training_class: TrainingClass) -> TrainingClass:
        """Create a new class."""
        with self.session_factory() as session:
            session.add(training_class)
            session.commit()
            session.refresh(training_class)
            return training_class

    def update(self, training_class: TrainingClass) -> TrainingClass:
        """Update an existing class."""
        with self.session_factory() as session:
            session.add(training_class)
            session.commit()
            session.refresh(training_class)
            return training_class
