"""SQLModel implementation of the payment store."""

from __future__ import annotations

from calendar import monthrange
from datetime import date
from typing import Callable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.payment import Payment


class SQLModelPaymentStore:
    """SQLModel-based payment store. Payments are only ever appended."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        """Retrieve a payment by ID."""
        with self.session_factory() as session:
            return session.get(Payment, payment_id)

    def list_all(self) -> list[Payment]:
        """List every payment ordered by payment date."""
        with self.session_factory() as session:
            statement = select(Payment).order_by(Payment.paid_on, Payment.id)  # type: ignore
            return list(session.exec(statement).all())

    def list_for(self, student_id: int, period_id: int) -> list[Payment]:
        """List the payments of one student against one period."""
        with self.session_factory() as session:
            statement = (
                select(Payment)
                .where(Payment.student_id == student_id, Payment.period_id == period_id)
                .order_by(Payment.paid_on, Payment.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_for_student(self, student_id: int) -> list[Payment]:
        """List all payments made by a student."""
        with self.session_factory() as session:
            statement = (
                select(Payment)
                .where(Payment.student_id == student_id)
                .order_by(Payment.paid_on, Payment.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_for_period(self, period_id: int) -> list[Payment]:
        """List all payments made against a period."""
        with self.session_factory() as session:
            statement = (
                select(Payment)
                .where(Payment.period_id == period_id)
                .order_by(Payment.paid_on, Payment.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_in_month(self, year: int, month: int) -> list[Payment]:
        """List payments whose payment date falls in the given month."""
        first = date(year, month, 1)
        last = date(year, month, monthrange(year, month)[1])
        with self.session_factory() as session:
            statement = (
                select(Payment)
                .where(Payment.paid_on >= first, Payment.paid_on <= last)
                .order_by(Payment.paid_on, Payment.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def count_for_period(self, period_id: int) -> int:
        """Count payments referencing a period."""
        with self.session_factory() as session:
            statement = select(func.count(Payment.id)).where(Payment.period_id == period_id)
            return int(session.exec(statement).one())

    def append(self, payment: Payment) -> Payment:
        """Persist a new payment and return it with its assigned id."""
        if payment.id is not None:
            raise ValueError("Payments are append-only; this payment already has an id")
        with self.session_factory() as session:
            session.add(payment)
            session.commit()
            session.refresh(payment)
            return payment
