"""Service module exports."""

from . import (
    auth,
    classes,
    debtors,
    documents,
    fees,
    instructors,
    payments,
    periods,
    reports,
    students,
    validation,
)

__all__ = [
    "auth",
    "classes",
    "debtors",
    "documents",
    "fees",
    "instructors",
    "payments",
    "periods",
    "reports",
    "students",
    "validation",
]
