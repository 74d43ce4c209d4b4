"""SQLModel implementation of Instructor repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.instructor import Instructor


class SQLModelInstructorRepository:
    """SQLModel-based instructor repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, instructor_id: int) -> Optional[Instructor]:
        with self.session_factory() as session:
            return session.get(Instructor, instructor_id)

    def get_by_dni(self, dni: str) -> Optional[Instructor]:
        with self.session_factory() as session:
            return session.exec(select(Instructor).where(Instructor.dni == dni)).first()

    def list_all(self, *, active_only: bool = False) -> list[Instructor]:
        with self.session_factory() as session:
            statement = select(Instructor)
            if active_only:
                statement = statement.where(Instructor.active == True)  # noqa: E712
            statement = statement.order_by(Instructor.full_name)  # type: ignore
            return list(session.exec(statement).all())

    def create(self, instructor: Instructor) -> Instructor:
        with self.session_factory() as session:
            session.add(instructor)
            session.commit()
            session.refresh(instructor)
            return instructor

    def update(self, instructor: Instructor) -> Instructor:
        with self.session_factory() as session:
            session.add(instructor)
            session.commit()
            session.refresh(instructor)
            return instructor
