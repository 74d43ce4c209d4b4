"""Fee period service tests."""

from __future__ import annotations

from datetime import date

import pytest

from dojodesk.errors import NotFound, RecordInUse, ValidationError
from dojodesk.services import periods


def _create(period_repo, **overrides):
    values = dict(
        name="March 2024",
        starts_on=date(2024, 3, 1),
        ends_on=date(2024, 3, 31),
        due_on=date(2024, 3, 10),
        base_amount=100,
        surcharge_amount=20,
        periods=period_repo,
    )
    values.update(overrides)
    return periods.create_period(**values)


def test_create_period(period_repo):
    period = _create(period_repo)

    assert period.id is not None
    assert period.base_amount == 100.0
    assert [p.name for p in periods.list_periods(periods=period_repo)] == ["March 2024"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": " "},
        {"ends_on": date(2024, 2, 1)},
        {"due_on": date(2024, 2, 28)},
        {"due_on": date(2024, 4, 1)},
        {"base_amount": 0},
        {"surcharge_amount": -1},
        {"base_amount": float("nan")},
        {"base_amount": float("inf")},
        {"surcharge_amount": float("nan")},
        {"surcharge_amount": float("inf")},
    ],
)
def test_create_period_validation(period_repo, overrides):
    with pytest.raises(ValidationError):
        _create(period_repo, **overrides)
    assert period_repo.list_all() == []


def test_due_date_may_equal_period_bounds(period_repo):
    assert _create(period_repo, due_on=date(2024, 3, 1)).due_on == date(2024, 3, 1)
    assert _create(period_repo, name="Late", due_on=date(2024, 3, 31)).due_on == date(2024, 3, 31)


def test_update_period_without_payments(period_repo, payment_store):
    period = _create(period_repo)
    period.base_amount = 110

    updated = periods.update_period(period, periods=period_repo, payments=payment_store)

    assert updated.base_amount == 110


def test_terms_frozen_once_paid(period_repo, payment_store, student_factory, payment_factory):
    period = _create(period_repo)
    payment_factory(student_factory(), period, 50)

    period.surcharge_amount = 30
    with pytest.raises(RecordInUse, match="surcharge_amount"):
        periods.update_period(period, periods=period_repo, payments=payment_store)

    fresh = periods.get_period(period.id, periods=period_repo)
    fresh.name = "March 2024 (regular)"
    assert periods.update_period(fresh, periods=period_repo, payments=payment_store).name.endswith(
        "(regular)"
    )


def test_delete_period(period_repo, payment_store, student_factory, payment_factory):
    unused = _create(period_repo, name="Unused")
    used = _create(period_repo)
    payment_factory(student_factory(), used, 10)

    periods.delete_period(unused.id, periods=period_repo, payments=payment_store)
    with pytest.raises(RecordInUse):
        periods.delete_period(used.id, periods=period_repo, payments=payment_store)
    with pytest.raises(NotFound):
        periods.get_period(unused.id, periods=period_repo)


def test_latest_period_uses_start_date(period_repo):
    _create(period_repo, name="April", starts_on=date(2024, 4, 1), ends_on=date(2024, 4, 30), due_on=date(2024, 4, 10))
    _create(period_repo)

    assert period_repo.latest().name == "April"
    assert [p.name for p in period_repo.list_ending_before(date(2024, 4, 1))] == ["March 2024"]
