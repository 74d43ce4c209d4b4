"""Fee period maintenance.

Period terms drive every debt computation, so once a payment references a
period its dates and amounts are frozen; only the display name may change.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

from ..domain.repositories import PaymentStore, PeriodDirectory
from ..errors import NotFound, RecordInUse, ValidationError
from ..logging_config import get_logger
from ..models.period import FeePeriod
from . import validation

logger = get_logger("periods")

_FINANCIAL_FIELDS = ("starts_on", "ends_on", "due_on", "base_amount", "surcharge_amount")


def _validate_terms(
    starts_on: Optional[date],
    ends_on: Optional[date],
    due_on: Optional[date],
    base_amount: Optional[float],
    surcharge_amount: Optional[float],
) -> None:
    if starts_on is None or ends_on is None or due_on is None:
        raise ValidationError("Start, end and due dates are required.")
    if starts_on > ends_on:
        raise ValidationError("Start date cannot be after the end date.")
    if due_on < starts_on:
        raise ValidationError("Due date cannot be before the start date.")
    if due_on > ends_on:
        raise ValidationError("Due date cannot be after the end date.")
    for label, value in (("Base amount", base_amount), ("Surcharge amount", surcharge_amount)):
        if value is None or not math.isfinite(float(value)):
            raise ValidationError(f"{label} must be a finite number.")
    if float(base_amount) <= 0:
        raise ValidationError("Base amount must be greater than zero.")
    if float(surcharge_amount) < 0:
        raise ValidationError("Surcharge amount cannot be negative.")


def create_period(
    *,
    name: str,
    starts_on: date,
    ends_on: date,
    due_on: date,
    base_amount: float,
    surcharge_amount: float = 0.0,
    periods: PeriodDirectory,
) -> FeePeriod:
    """Validate and create a fee period."""

    name = validation.require_text(name, "Period name")
    _validate_terms(starts_on, ends_on, due_on, base_amount, surcharge_amount)
    period = periods.create(
        FeePeriod(
            name=name,
            starts_on=starts_on,
            ends_on=ends_on,
            due_on=due_on,
            base_amount=float(base_amount),
            surcharge_amount=float(surcharge_amount),
        )
    )
    logger.info("Fee period created", extra={"period_id": period.id, "period": name})
    return period


def get_period(period_id: int, *, periods: PeriodDirectory) -> FeePeriod:
    validation.ensure_positive_id(period_id, "Period id")
    period = periods.get_by_id(period_id)
    if period is None:
        raise NotFound("Fee period", period_id)
    return period


def list_periods(*, periods: PeriodDirectory) -> list[FeePeriod]:
    return periods.list_all()


def update_period(
    period: FeePeriod, *, periods: PeriodDirectory, payments: PaymentStore
) -> FeePeriod:
    """Persist edits to a period.

    Raises:
        RecordInUse: dates or amounts changed while payments reference the period.
    """

    if period.id is None:
        raise ValidationError("Period id is required for an update.")
    current = get_period(period.id, periods=periods)
    period.name = validation.require_text(period.name, "Period name")
    _validate_terms(
        period.starts_on, period.ends_on, period.due_on, period.base_amount, period.surcharge_amount
    )
    changed = [f for f in _FINANCIAL_FIELDS if getattr(current, f) != getattr(period, f)]
    if changed and payments.count_for_period(period.id) > 0:
        raise RecordInUse(
            f"Period {period.id} already has payments; {', '.join(changed)} cannot change."
        )
    return periods.update(period)


def delete_period(period_id: int, *, periods: PeriodDirectory, payments: PaymentStore) -> None:
    """Delete a period that no payment references."""

    get_period(period_id, periods=periods)
    referencing = payments.count_for_period(period_id)
    if referencing:
        raise RecordInUse(f"Period {period_id} is referenced by {referencing} payment(s).")
    periods.delete(period_id)
    logger.info("Fee period deleted", extra={"period_id": period_id})
