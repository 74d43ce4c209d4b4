"""Delivery status of the paperwork each student owes the school."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .student import Student


class DocumentStatus(SQLModel, table=True):
    """One required document (medical form, id copy...) and where it stands."""

    __tablename__: ClassVar[str] = "document_status"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(foreign_key="student.id", nullable=False, index=True)
    document_type: str = Field(nullable=False, max_length=80)
    status: str = Field(default="pending", nullable=False, max_length=16, index=True)
    notes: str = Field(default="", max_length=255)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    student: "Student" = Relationship(
        sa_relationship=relationship("Student", back_populates="documents")
    )
