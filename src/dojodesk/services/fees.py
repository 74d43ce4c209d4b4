"""Amount owed for a fee period on a given date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..models.period import FeePeriod


@dataclass(frozen=True, slots=True)
class FeeAssessment:
    """What a student owes for one period as of an evaluation date."""

    total_due: float
    surcharge_applied: bool

    def __iter__(self):
        # Allows ``total, late = amount_due(...)``
        yield self.total_due
        yield self.surcharge_applied


def normalize_amount(amount: float) -> float:
    """Round to cents so float sums compare the way a cashier would."""

    return round(float(amount) + 0.0, 2)


def is_late(period: FeePeriod, on_date: date) -> bool:
    """Return True when ``on_date`` is strictly after the period's due date."""

    return on_date > period.due_on


def surcharge_in_force(period: FeePeriod, on_date: date) -> float:
    """Return the surcharge that applies on ``on_date`` (0.0 when on time)."""

    if is_late(period, on_date):
        return float(period.surcharge_amount or 0.0)
    return 0.0


def amount_due(period: FeePeriod, evaluation_date: date) -> FeeAssessment:
    """Return the total owed for ``period`` when evaluated on ``evaluation_date``.

    The surcharge is added only when the evaluation date is strictly after the
    due date; paying on the due date itself is on time.
    """

    base = float(period.base_amount or 0.0)
    if is_late(period, evaluation_date):
        return FeeAssessment(
            total_due=normalize_amount(base + float(period.surcharge_amount or 0.0)),
            surcharge_applied=True,
        )
    return FeeAssessment(total_due=normalize_amount(base), surcharge_applied=False)
