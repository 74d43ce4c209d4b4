"""Command line front end for DojoDesk."""

from __future__ import annotations

import functools
from datetime import date, datetime

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .errors import DojoDeskError
from .logging_config import setup_logging
from .services import auth, debtors, payments, periods, reports, students

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


def _parse_month(_ctx, _param, value: str | None) -> date | None:
    """Turn ``YYYY-MM`` into the first day of that month."""

    if value is None:
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except ValueError:
        raise click.BadParameter("use the YYYY-MM format") from None


def _handle_errors(func):
    """Report domain errors as CLI errors instead of tracebacks."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DojoDeskError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """DojoDesk back office."""

    if ctx.obj is None:
        config = BaseConfig()
        setup_logging(config)
        ctx.obj = create_app_context(config)


@main.command("init-db")
@click.pass_obj
def init_db(app: AppContext) -> None:
    """Create the database schema."""

    click.echo(f"Database ready: {app.config.DATABASE_URL}")


@main.command("create-user")
@click.option("--username", required=True)
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--role", type=click.Choice(BaseConfig.USER_ROLES), default="staff", show_default=True)
@click.pass_obj
@_handle_errors
def create_user(app: AppContext, username: str, password: str, role: str) -> None:
    """Create a back-office user."""

    user = auth.create_user(
        username=username, password=password, role=role, session_factory=app.session_factory
    )
    click.echo(f"Created user {user.username} ({user.role})")


@main.command("add-student")
@click.option("--name", "full_name", required=True)
@click.option("--dni", required=True)
@click.option("--birth-date", type=_DATE, required=True)
@click.option("--enrolled-on", type=_DATE, default=None, help="Defaults to today.")
@click.option("--email", default=None)
@click.option("--phone", default="")
@click.option("--address", default="")
@click.pass_obj
@_handle_errors
def add_student(app: AppContext, full_name, dni, birth_date, enrolled_on, email, phone, address) -> None:
    """Register a student."""

    student = students.register_student(
        full_name=full_name,
        dni=dni,
        birth_date=_as_date(birth_date),
        enrolled_on=_as_date(enrolled_on) or date.today(),
        email=email,
        phone=phone,
        address=address,
        students=app.students,
    )
    click.echo(f"Student #{student.id}: {student.full_name}")


@main.command("add-period")
@click.option("--name", required=True)
@click.option("--starts", type=_DATE, required=True)
@click.option("--ends", type=_DATE, required=True)
@click.option("--due", type=_DATE, required=True)
@click.option("--base", "base_amount", type=float, required=True)
@click.option("--surcharge", "surcharge_amount", type=float, default=0.0, show_default=True)
@click.pass_obj
@_handle_errors
def add_period(app: AppContext, name, starts, ends, due, base_amount, surcharge_amount) -> None:
    """Create a fee period."""

    period = periods.create_period(
        name=name,
        starts_on=_as_date(starts),
        ends_on=_as_date(ends),
        due_on=_as_date(due),
        base_amount=base_amount,
        surcharge_amount=surcharge_amount,
        periods=app.periods,
    )
    click.echo(f"Period #{period.id}: {period.name}")


@main.command("pay")
@click.option("--student-id", type=int, required=True)
@click.option("--period-id", type=int, required=True)
@click.option("--amount", type=float, required=True)
@click.option("--method", type=click.Choice(BaseConfig.PAYMENT_METHODS), default="cash", show_default=True)
@click.option("--date", "paid_on", type=_DATE, default=None, help="Defaults to today.")
@click.pass_obj
@_handle_errors
def pay(app: AppContext, student_id, period_id, amount, method, paid_on) -> None:
    """Record a payment."""

    payment, outcome = payments.record_payment_with_settlement(
        student_id=student_id,
        period_id=period_id,
        amount=amount,
        method=method,
        paid_on=_as_date(paid_on),
        students=app.students,
        periods=app.periods,
        payments=app.payments,
    )
    click.echo(
        f"Payment #{payment.id}: {payment.amount:.2f} ({outcome.state.value}, "
        f"balance {outcome.balance:.2f})"
    )


@main.command("debtors")
@click.option("--period-id", type=int, default=None, help="Defaults to the latest period.")
@click.option("--active-only", is_flag=True, default=False)
@click.pass_obj
@_handle_errors
def list_debtors(app: AppContext, period_id, active_only) -> None:
    """List students who owe money for a period."""

    period, owed = debtors.load_debtors_for_period(
        period_id=period_id,
        students=app.students,
        periods=app.periods,
        payments=app.payments,
        active_only=active_only,
    )
    click.echo(f"Debtors for {period.name}:")
    if not owed:
        click.echo("  nobody owes anything")
    for debtor in owed:
        click.echo(f"  #{debtor.student.id} {debtor.student.full_name}: {debtor.amount_owed:.2f}")


@main.command("arrears")
@click.option("--month", required=True, callback=_parse_month, help="YYYY-MM")
@click.pass_obj
@_handle_errors
def arrears(app: AppContext, month: date) -> None:
    """List debts from periods that ended before MONTH."""

    owed = debtors.load_debtors_before_month(
        month, students=app.students, periods=app.periods, payments=app.payments
    )
    if not owed:
        click.echo(f"No arrears before {month:%Y-%m}")
        return
    for entry in owed:
        click.echo(f"#{entry.student.id} {entry.student.full_name}: {entry.total_owed:.2f}")
        for debt in entry.debts:
            click.echo(f"  {debt.period.name}: {debt.amount_owed:.2f}")


@main.command("income")
@click.option("--month", required=True, callback=_parse_month, help="YYYY-MM")
@click.pass_obj
@_handle_errors
def income(app: AppContext, month: date) -> None:
    """Show what was collected during MONTH."""

    paid = app.payments.list_in_month(month.year, month.month)
    roster = app.students.list_all(active_only=True)
    click.echo(f"Income {month:%Y-%m}: {reports.monthly_income(paid, month):.2f}")
    click.echo(f"Payments with surcharge: {reports.surcharged_payment_count(paid)}")
    missing = reports.students_without_payment(roster, paid, month)
    if missing:
        click.echo("Active students without payments:")
        for student in missing:
            click.echo(f"  #{student.id} {student.full_name}")


if __name__ == "__main__":  # pragma: no cover
    main()
