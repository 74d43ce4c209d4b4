"""Payment store protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.payment import Payment


class PaymentStore(Protocol):
    """Append-only access to recorded payments."""

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        """Retrieve a payment by ID."""
        ...

    def list_all(self) -> list[Payment]:
        """List every payment ordered by payment date."""
        ...

    def list_for(self, student_id: int, period_id: int) -> list[Payment]:
        """List the payments of one student against one period."""
        ...

    def list_for_student(self, student_id: int) -> list[Payment]:
        """List all payments made by a student."""
        ...

    def list_for_period(self, period_id: int) -> list[Payment]:
        """List all payments made against a period."""
        ...

    def list_in_month(self, year: int, month: int) -> list[Payment]:
        """List payments whose payment date falls in the given month."""
        ...

    def count_for_period(self, period_id: int) -> int:
        """Count payments referencing a period."""
        ...

    def append(self, payment: Payment) -> Payment:
        """Persist a new payment and return it with its assigned id."""
        ...
