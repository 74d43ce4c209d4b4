"""Recorded student payments."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .period import FeePeriod
    from .student import Student


class Payment(SQLModel, table=True):
    """One payment by a student against a fee period.

    Whether a payment settles the period is never stored here; it is derived
    from the period terms and the sum of the student's payments.
    """

    __tablename__: ClassVar[str] = "payment"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(foreign_key="student.id", nullable=False, index=True)
    period_id: int = Field(foreign_key="fee_period.id", nullable=False, index=True)
    paid_on: date = Field(nullable=False, index=True)
    amount: float = Field(nullable=False)
    method: str = Field(nullable=False, max_length=32)
    surcharge_charged: float = Field(
        default=0.0,
        nullable=False,
        description="Surcharge in force on paid_on; informational only",
    )
    notes: str = Field(default="", max_length=255)

    student: "Student" = Relationship(
        sa_relationship=relationship("Student", back_populates="payments")
    )
    period: "FeePeriod" = Relationship(
        sa_relationship=relationship("FeePeriod", back_populates="payments")
    )

    @property
    def surcharge_applied(self) -> bool:
        return self.surcharge_charged > 0
