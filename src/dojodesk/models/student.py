"""Student records."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .document import DocumentStatus
    from .payment import Payment


class Student(SQLModel, table=True):
    """A person enrolled at the school."""

    __tablename__: ClassVar[str] = "student"

    id: Optional[int] = Field(default=None, primary_key=True)
    full_name: str = Field(nullable=False, max_length=120, index=True)
    dni: str = Field(nullable=False, unique=True, index=True, max_length=16)
    birth_date: date = Field(nullable=False)
    address: str = Field(default="", max_length=200)
    phone: str = Field(default="", max_length=40)
    email: Optional[str] = Field(default=None, max_length=120)
    enrolled_on: date = Field(nullable=False)
    active: bool = Field(default=True, nullable=False, index=True)

    payments: list["Payment"] = Relationship(
        back_populates="student",
        sa_relationship=relationship("Payment", back_populates="student"),
    )
    documents: list["DocumentStatus"] = Relationship(
        back_populates="student",
        sa_relationship=relationship("DocumentStatus", back_populates="student"),
    )
