"""Payment accumulation, classification and recording."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Optional

from ..domain.repositories import PaymentStore, PeriodDirectory, StudentDirectory
from ..errors import InvalidAmount, NotFound
from ..logging_config import get_logger
from ..models.payment import Payment
from ..models.period import FeePeriod
from . import reports, validation
from .fees import amount_due, normalize_amount, surcharge_in_force

logger = get_logger("payments")


class PaymentState(str, Enum):
    """How far a student's payments cover what a period asks for."""

    NONE = "none"
    PARTIAL = "partial"
    COMPLETE = "complete"
    OVERPAID = "overpaid"


@dataclass(frozen=True, slots=True)
class Settlement:
    """Read model combining what is due, what was paid and the resulting state."""

    student_id: int
    period_id: int
    due: float
    paid: float
    state: PaymentState
    surcharge_applied: bool

    @property
    def balance(self) -> float:
        """Amount still owed; negative when the student overpaid."""
        return normalize_amount(self.due - self.paid)


def amount_paid(payments: Iterable[Payment], student_id: int, period_id: int) -> float:
    """Sum the payments made by ``student_id`` against ``period_id``."""

    total = sum(
        float(p.amount)
        for p in payments
        if p.student_id == student_id and p.period_id == period_id
    )
    return normalize_amount(total)


def classify(due: float, paid: float) -> PaymentState:
    """Classify ``paid`` against ``due`` at cent precision.

    A free period with nothing paid counts as complete.
    """

    due_cents = normalize_amount(due)
    paid_cents = normalize_amount(paid)
    if paid_cents > due_cents:
        return PaymentState.OVERPAID
    if paid_cents == due_cents:
        return PaymentState.COMPLETE
    if paid_cents == 0:
        return PaymentState.NONE
    return PaymentState.PARTIAL


def settlement(
    period: FeePeriod,
    payments: Iterable[Payment],
    student_id: int,
    *,
    today: Optional[date] = None,
) -> Settlement:
    """Return the settlement of ``student_id`` for ``period`` as of ``today``."""

    assessment = amount_due(period, today or date.today())
    paid = amount_paid(payments, student_id, period.id)
    return Settlement(
        student_id=student_id,
        period_id=period.id,
        due=assessment.total_due,
        paid=paid,
        state=classify(assessment.total_due, paid),
        surcharge_applied=assessment.surcharge_applied,
    )


def record_payment_with_settlement(
    *,
    student_id: int,
    period_id: int,
    amount: float,
    method: str,
    paid_on: Optional[date] = None,
    notes: str = "",
    students: StudentDirectory,
    periods: PeriodDirectory,
    payments: PaymentStore,
    today: Optional[date] = None,
) -> tuple[Payment, Settlement]:
    """Validate and append a new payment; also return the resulting settlement.

    The settlement is evaluated on the payment date.

    Raises:
        InvalidAmount: ``amount`` is not finite, zero or negative.
        ValidationError: missing method or a payment date in the future.
        NotFound: the student or the period does not exist.
    """

    if amount is None or not math.isfinite(float(amount)):
        raise InvalidAmount("Payment amount must be a finite number.")
    if float(amount) <= 0:
        raise InvalidAmount("Payment amount must be greater than zero.")
    method = validation.require_text(method, "Payment method")
    reference = today or date.today()
    paid_on = validation.ensure_not_future(paid_on or reference, "Payment date", today=reference)

    student = students.get_by_id(student_id)
    if student is None:
        raise NotFound("Student", student_id)
    period = periods.get_by_id(period_id)
    if period is None:
        raise NotFound("Fee period", period_id)

    payment = payments.append(
        Payment(
            student_id=student_id,
            period_id=period_id,
            paid_on=paid_on,
            amount=normalize_amount(amount),
            method=method,
            surcharge_charged=surcharge_in_force(period, paid_on),
            notes=(notes or "").strip(),
        )
    )

    outcome = settlement(period, payments.list_for(student_id, period_id), student_id, today=paid_on)
    logger.info(
        "Payment recorded",
        extra={
            "payment_id": payment.id,
            "student_id": student_id,
            "period_id": period_id,
            "amount": payment.amount,
            "state": outcome.state.value,
            "balance": outcome.balance,
        },
    )
    return payment, outcome


def record_payment(
    *,
    student_id: int,
    period_id: int,
    amount: float,
    method: str,
    paid_on: Optional[date] = None,
    notes: str = "",
    students: StudentDirectory,
    periods: PeriodDirectory,
    payments: PaymentStore,
    today: Optional[date] = None,
) -> Payment:
    """Validate and append a new payment; see :func:`record_payment_with_settlement`."""

    payment, _outcome = record_payment_with_settlement(
        student_id=student_id,
        period_id=period_id,
        amount=amount,
        method=method,
        paid_on=paid_on,
        notes=notes,
        students=students,
        periods=periods,
        payments=payments,
        today=today,
    )
    return payment


def list_payments(payments: PaymentStore) -> list[Payment]:
    return payments.list_all()


def list_payments_for_student(student_id: int, *, payments: PaymentStore) -> list[Payment]:
    validation.ensure_positive_id(student_id, "Student id")
    return payments.list_for_student(student_id)


def list_payments_for_period(period_id: int, *, payments: PaymentStore) -> list[Payment]:
    validation.ensure_positive_id(period_id, "Period id")
    return payments.list_for_period(period_id)


def count_surcharged_payments(payments: PaymentStore) -> int:
    """Count stored payments that were made while a surcharge was in force."""

    return reports.surcharged_payment_count(payments.list_all())
