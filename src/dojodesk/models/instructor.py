"""Instructor records: the senseis and coaches who run classes."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Instructor(SQLModel, table=True):
    __tablename__: ClassVar[str] = "instructor"

    id: Optional[int] = Field(default=None, primary_key=True)
    full_name: str = Field(nullable=False, max_length=120, index=True)
    dni: str = Field(nullable=False, unique=True, index=True, max_length=16)
    birth_date: date = Field(nullable=False)
    address: str = Field(default="", max_length=200)
    phone: str = Field(default="", max_length=40)
    email: Optional[str] = Field(default=None, max_length=120)
    hired_on: date = Field(nullable=False)
    active: bool = Field(default=True, nullable=False, index=True)
