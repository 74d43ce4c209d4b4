"""Fee period directory protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.period import FeePeriod


class PeriodDirectory(Protocol):
    """Read/write access to fee periods."""

    def get_by_id(self, period_id: int) -> Optional[FeePeriod]:
        """Retrieve a period by ID."""
        ...

    def list_all(self) -> list[FeePeriod]:
        """List periods ordered by start date."""
        ...

    def list_ending_before(self, cutoff: date) -> list[FeePeriod]:
        """List periods whose end date is strictly before ``cutoff``."""
        ...

    def latest(self) -> Optional[FeePeriod]:
        """Return the period with the most recent start date."""
        ...

    def create(self, period: FeePeriod) -> FeePeriod:
        """Create a new period."""
        ...

    def update(self, period: FeePeriod) -> FeePeriod:
        """Update an existing period."""
        ...

    def delete(self, period_id: int) -> None:
        """Delete a period by ID."""
        ...
