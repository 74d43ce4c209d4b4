"""Debtor enumeration across a roster and one or more fee periods."""

from __future__ import annotations

from datetime import date
from typing import Iterable, NamedTuple, Optional, Sequence

from ..domain.repositories import PaymentStore, PeriodDirectory, StudentDirectory
from ..errors import NotFound
from ..logging_config import get_logger
from ..models.payment import Payment
from ..models.period import FeePeriod
from ..models.student import Student
from .fees import amount_due, normalize_amount
from .payments import amount_paid

logger = get_logger("debtors")


class Debtor(NamedTuple):
    """A student together with what they still owe for a period."""

    student: Student
    amount_owed: float


class PeriodDebt(NamedTuple):
    period: FeePeriod
    amount_owed: float


class Arrears(NamedTuple):
    """A student and every earlier period they have not settled, in period order."""

    student: Student
    debts: list[PeriodDebt]

    @property
    def total_owed(self) -> float:
        return normalize_amount(sum(d.amount_owed for d in self.debts))


def _owed(period: FeePeriod, payments: Sequence[Payment], student_id: int, today: date) -> float:
    due = amount_due(period, today).total_due
    paid = amount_paid(payments, student_id, period.id)
    return normalize_amount(due - paid)


def _log_orphans(
    roster: Sequence[Student], periods: Sequence[FeePeriod], payments: Sequence[Payment]
) -> None:
    """Count payments that point outside the snapshot; they are skipped, not fatal."""

    student_ids = {s.id for s in roster}
    period_ids = {p.id for p in periods}
    orphans = sum(
        1 for p in payments if p.student_id not in student_ids or p.period_id not in period_ids
    )
    if orphans:
        logger.debug(
            "Skipping payments outside the roster/period snapshot",
            extra={"skipped": orphans},
        )


def debtors_for_period(
    period: FeePeriod,
    roster: Iterable[Student],
    all_payments: Iterable[Payment],
    *,
    today: Optional[date] = None,
) -> list[Debtor]:
    """Return the students in ``roster`` who still owe money for ``period``.

    Order follows the roster. Students who paid in full or overpaid are left
    out, as is everyone when the period is free.
    """

    evaluation_date = today or date.today()
    students = list(roster)
    payments = list(all_payments)
    _log_orphans(students, [period], payments)

    debtors: list[Debtor] = []
    for student in students:
        owed = _owed(period, payments, student.id, evaluation_date)
        if owed > 0:
            debtors.append(Debtor(student=student, amount_owed=owed))
    return debtors


def debtors_before_month(
    reference_month: date,
    roster: Iterable[Student],
    all_periods: Iterable[FeePeriod],
    all_payments: Iterable[Payment],
    *,
    today: Optional[date] = None,
) -> list[Arrears]:
    """Return unsettled debts from periods that ended before ``reference_month``.

    ``reference_month`` may be any day of the month; only periods whose end
    date is strictly before the first day of that month are considered.
    Results follow roster order; students with nothing owed are omitted.
    """

    evaluation_date = today or date.today()
    cutoff = reference_month.replace(day=1)
    students = list(roster)
    known_periods = list(all_periods)
    periods = [p for p in known_periods if p.ends_on < cutoff]
    payments = list(all_payments)
    _log_orphans(students, known_periods, payments)

    arrears: list[Arrears] = []
    for student in students:
        debts: list[PeriodDebt] = []
        for period in periods:
            owed = _owed(period, payments, student.id, evaluation_date)
            if owed > 0:
                debts.append(PeriodDebt(period=period, amount_owed=owed))
        if debts:
            arrears.append(Arrears(student=student, debts=debts))
    return arrears


def is_debtor(
    period: FeePeriod,
    student_id: int,
    all_payments: Iterable[Payment],
    *,
    today: Optional[date] = None,
) -> bool:
    """Return True when ``student_id`` still owes money for ``period``."""

    return _owed(period, list(all_payments), student_id, today or date.today()) > 0


def load_debtors_for_period(
    *,
    period_id: Optional[int] = None,
    students: StudentDirectory,
    periods: PeriodDirectory,
    payments: PaymentStore,
    active_only: bool = False,
    today: Optional[date] = None,
) -> tuple[FeePeriod, list[Debtor]]:
    """Fetch a snapshot from the stores and enumerate debtors for one period.

    Without ``period_id`` the most recent period (latest start date) is used.
    """

    if period_id is None:
        period = periods.latest()
        if period is None:
            raise NotFound("Fee period", "latest")
    else:
        period = periods.get_by_id(period_id)
        if period is None:
            raise NotFound("Fee period", period_id)

    roster = students.list_all(active_only=active_only)
    debtors = debtors_for_period(
        period, roster, payments.list_for_period(period.id), today=today
    )
    logger.info(
        "Debtors enumerated",
        extra={"period_id": period.id, "roster": len(roster), "debtors": len(debtors)},
    )
    return period, debtors


def load_debtors_before_month(
    reference_month: date,
    *,
    students: StudentDirectory,
    periods: PeriodDirectory,
    payments: PaymentStore,
    active_only: bool = False,
    today: Optional[date] = None,
) -> list[Arrears]:
    """Store-backed variant of :func:`debtors_before_month`."""

    cutoff = reference_month.replace(day=1)
    return debtors_before_month(
        reference_month,
        students.list_all(active_only=active_only),
        periods.list_ending_before(cutoff),
        payments.list_all(),
        today=today,
    )
