"""Fee period (billing cycle) terms."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .payment import Payment


class FeePeriod(SQLModel, table=True):
    """A billing cycle with a base fee, a late surcharge and a due date.

    Paying on ``due_on`` is still on time; the surcharge applies from the
    following day onwards.
    """

    __tablename__: ClassVar[str] = "fee_period"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    starts_on: date = Field(nullable=False, index=True)
    ends_on: date = Field(nullable=False, index=True)
    due_on: date = Field(nullable=False)
    base_amount: float = Field(nullable=False)
    surcharge_amount: float = Field(default=0.0, nullable=False)

    payments: list["Payment"] = Relationship(
        back_populates="period",
        sa_relationship=relationship("Payment", back_populates="period"),
    )
