"""Student directory protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.student import Student


class StudentDirectory(Protocol):
    """Read/write access to the student roster."""

    def get_by_id(self, student_id: int) -> Optional[Student]:
        """Retrieve a student by ID."""
        ...

    def get_by_dni(self, dni: str) -> Optional[Student]:
        """Retrieve a student by national id number."""
        ...

    def list_all(self, *, active_only: bool = False) -> list[Student]:
        """List students ordered by name."""
        ...

    def create(self, student: Student) -> Student:
        """Create a new student."""
        ...

    def update(self, student: Student) -> Student:
        """Update an existing student."""
        ...
