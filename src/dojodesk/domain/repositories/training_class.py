"""Training class repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.training_class import TrainingClass


class TrainingClassRepository(Protocol):
    """Repository for managing class entities."""

    def get_by_id(self, class_id: int) -> Optional[TrainingClass]:
        """Retrieve a class by ID."""
        ...

    def list_all(self, *, active_only: bool = False) -> list[TrainingClass]:
        """List classes ordered by name."""
        ...

    def create(self, training_class: TrainingClass) -> TrainingClass:
        """Create a new class."""
        ...

    def update(self, training_class: TrainingClass) -> TrainingClass:
        """Update an existing class."""
        ...
