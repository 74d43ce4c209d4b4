"""Document status repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.document import DocumentStatus


class DocumentStatusRepository(Protocol):
    """Repository for student document status rows."""

    def get_by_id(self, document_id: int) -> Optional[DocumentStatus]:
        """Retrieve a document status row by ID."""
        ...

    def list_all(self) -> list[DocumentStatus]:
        """List every document status row."""
        ...

    def list_for_student(self, student_id: int) -> list[DocumentStatus]:
        """List the documents tracked for one student."""
        ...

    def create(self, document: DocumentStatus) -> DocumentStatus:
        """Create a new document status row."""
        ...

    def update(self, document: DocumentStatus) -> DocumentStatus:
        """Update an existing document status row."""
        ...

    def delete(self, document_id: int) -> None:
        """Delete a document status row by ID."""
        ...
