"""Command line interface tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from dojodesk.cli import main
from dojodesk.config import BaseConfig
from dojodesk.context import create_app_context
from dojodesk.errors import ValidationError
from dojodesk.services import reports


@pytest.fixture
def app(monkeypatch, tmp_path):
    monkeypatch.setenv("DOJODESK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DOJODESK_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    return create_app_context(BaseConfig())


@pytest.fixture
def invoke(app):
    runner = CliRunner()

    def _invoke(*args: str):
        return runner.invoke(main, list(args), obj=app)

    return _invoke


def _seed(invoke) -> None:
    assert invoke("add-student", "--name", "Ana Torres", "--dni", "30.111.222", "--birth-date", "2001-04-02").exit_code == 0
    assert invoke(
        "add-period",
        "--name", "March 2024",
        "--starts", "2024-03-01",
        "--ends", "2024-03-31",
        "--due", "2024-03-10",
        "--base", "100",
        "--surcharge", "20",
    ).exit_code == 0


def test_init_db_reports_database(invoke, tmp_path):
    result = invoke("init-db")

    assert result.exit_code == 0
    assert "cli.db" in result.output


def test_create_user(invoke):
    result = invoke("create-user", "--username", "admin", "--password", "black-belt", "--role", "admin")

    assert result.exit_code == 0
    assert "Created user admin (admin)" in result.output


def test_create_user_error_is_reported(invoke):
    result = invoke("create-user", "--username", "admin", "--password", "short")

    assert result.exit_code == 1
    assert "at least 8 characters" in result.output


def test_payment_and_debtor_reports(invoke, app):
    _seed(invoke)
    student = app.students.list_all()[0]

    paid = invoke(
        "pay", "--student-id", str(student.id), "--period-id", "1", "--amount", "40", "--date", "2024-03-05"
    )
    assert paid.exit_code == 0, paid.output
    assert "40.00 (partial, balance 60.00)" in paid.output

    debtors = invoke("debtors")
    assert debtors.exit_code == 0
    assert "Debtors for March 2024:" in debtors.output
    assert "Ana Torres: 80.00" in debtors.output

    arrears = invoke("arrears", "--month", "2024-06")
    assert "Ana Torres: 80.00" in arrears.output
    assert "March 2024: 80.00" in arrears.output

    income = invoke("income", "--month", "2024-03")
    assert "Income 2024-03: 40.00" in income.output
    assert "Payments with surcharge: 0" in income.output


def test_pay_rejects_invalid_amount(invoke):
    _seed(invoke)

    result = invoke("pay", "--student-id", "1", "--period-id", "1", "--amount", "0")

    assert result.exit_code == 1
    assert "greater than zero" in result.output


def test_debtors_without_periods(invoke):
    result = invoke("debtors")

    assert result.exit_code == 1
    assert "Fee period latest not found" in result.output


def test_month_option_format(invoke):
    result = invoke("arrears", "--month", "June")

    assert result.exit_code == 2
    assert "YYYY-MM" in result.output


def test_no_arrears(invoke):
    _seed(invoke)

    result = invoke("arrears", "--month", "2024-03")

    assert "No arrears before 2024-03" in result.output


@pytest.mark.parametrize("amount", ["inf", "nan"])
def test_pay_rejects_non_finite_amount(invoke, app, amount):
    _seed(invoke)

    result = invoke("pay", "--student-id", "1", "--period-id", "1", "--amount", amount, "--date", "2024-03-05")

    assert result.exit_code == 1
    assert "finite number" in result.output
    assert app.payments.list_all() == []


def test_income_reports_domain_errors(invoke, monkeypatch):
    def _broken(*_args, **_kwargs):
        raise ValidationError("Month has no data.")

    monkeypatch.setattr(reports, "monthly_income", _broken)

    result = invoke("income", "--month", "2024-03")

    assert result.exit_code == 1
    assert "Month has no data." in result.output
