"""Instructor repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.instructor import Instructor


class InstructorRepository(Protocol):
    def get_by_id(self, instructor_id: int) -> Optional[Instructor]:
        ...

    def get_by_dni(self, dni: str) -> Optional[Instructor]:
        ...

    def list_all(self, *, active_only: bool = False) -> list[Instructor]:
        ...

    def create(self, instructor: Instructor) -> Instructor:
        ...

    def update(self, instructor: Instructor) -> Instructor:
        ...
