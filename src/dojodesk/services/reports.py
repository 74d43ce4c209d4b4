"""Monthly payment aggregations for the income and collection reports."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable

from ..models.payment import Payment
from ..models.student import Student
from .fees import normalize_amount


def _in_month(payment: Payment, month: date) -> bool:
    return payment.paid_on.year == month.year and payment.paid_on.month == month.month


def monthly_income(payments: Iterable[Payment], month: date) -> float:
    """Total collected during the month containing ``month``."""

    return normalize_amount(sum(p.amount for p in payments if _in_month(p, month)))


def payments_by_student(payments: Iterable[Payment], month: date) -> dict[int, float]:
    """Total paid per student id during the month, in order of first payment."""

    totals: dict[int, float] = defaultdict(float)
    for payment in payments:
        if _in_month(payment, month):
            totals[payment.student_id] += payment.amount
    return {student_id: normalize_amount(total) for student_id, total in totals.items()}


def students_without_payment(
    roster: Iterable[Student], payments: Iterable[Payment], month: date
) -> list[Student]:
    """Students in ``roster`` who paid nothing during the month."""

    paid_ids = {p.student_id for p in payments if _in_month(p, month)}
    return [s for s in roster if s.id not in paid_ids]


def surcharged_payment_count(payments: Iterable[Payment]) -> int:
    return sum(1 for p in payments if p.surcharge_applied)
