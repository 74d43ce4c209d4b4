"""SQLModel implementation of the student directory."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.student import Student


class SQLModelStudentDirectory:
    """SQLModel-based student repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        """Retrieve a student by ID."""
        with self.session_factory() as session:
            return session.get(Student, student_id)

    def get_by_dni(self, dni: str) -> Optional[Student]:
        """Retrieve a student by national id number."""
        with self.session_factory() as session:
            return session.exec(select(Student).where(Student.dni == dni)).first()

    def list_all(self, *, active_only: bool = False) -> list[Student]:
        """List students ordered by name."""
        with self.session_factory() as session:
            statement = select(Student)
            if active_only:
                statement = statement.where(Student.active == True)  # noqa: E712
            statement = statement.order_by(Student.full_name, Student.id)  # type: ignore
            return list(session.exec(statement).all())

    def create(self, student: Student) -> Student:
        """Create a new student."""
        with self.session_factory() as session:
            session.add(student)
            session.commit()
            session.refresh(student)
            return student

    def update(self, student: Student) -> Student:
        """Update an existing student."""
        with self.session_factory() as session:
            session.add(student)
            session.commit()
            session.refresh(student)
            return student
