"""SQLModel implementation of the fee period directory."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.period import FeePeriod


class SQLModelPeriodDirectory:
    """SQLModel-based fee period repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, period_id: int) -> Optional[FeePeriod]:
        """Retrieve a period by ID."""
        with self.session_factory() as session:
            return session.get(FeePeriod, period_id)

    def list_all(self) -> list[FeePeriod]:
        """List periods ordered by start date."""
        with self.session_factory() as session:
            statement = select(FeePeriod).order_by(FeePeriod.starts_on, FeePeriod.id)  # type: ignore
            return list(session.exec(statement).all())

    def list_ending_before(self, cutoff: date) -> list[FeePeriod]:
        """List periods whose end date is strictly before ``cutoff``."""
        with self.session_factory() as session:
            statement = (
                select(FeePeriod)
                .where(FeePeriod.ends_on < cutoff)
                .order_by(FeePeriod.starts_on, FeePeriod.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def latest(self) -> Optional[FeePeriod]:
        """Return the period with the most recent start date."""
        with self.session_factory() as session:
            statement = select(FeePeriod).order_by(
                FeePeriod.starts_on.desc(), FeePeriod.id.desc()  # type: ignore
            )
            return session.exec(statement).first()

    def create(self, period: FeePeriod) -> FeePeriod:
        """Create a new period."""
        with self.session_factory() as session:
            session.add(period)
            session.commit()
            session.refresh(period)
            return period

    def update(self, period: FeePeriod) -> FeePeriod:
        """Update an existing period."""
        with self.session_factory() as session:
            session.add(period)
            session.commit()
            session.refresh(period)
            return period

    def delete(self, period_id: int) -> None:
        """Delete a period by ID."""
        with self.session_factory() as session:
            period = session.get(FeePeriod, period_id)
            if period:
                session.delete(period)
                session.commit()
