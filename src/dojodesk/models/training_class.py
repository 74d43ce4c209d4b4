"""Scheduled classes offered by the school."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class TrainingClass(SQLModel, table=True):
    """A recurring class, e.g. "Tai chi beginners", with its timetable."""

    __tablename__: ClassVar[str] = "training_class"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    description: str = Field(default="", max_length=255)
    schedule: str = Field(nullable=False, max_length=120, description="Free text, e.g. Mon/Wed 18:00-19:30")
    max_capacity: int = Field(nullable=False)
    active: bool = Field(default=True, nullable=False)
