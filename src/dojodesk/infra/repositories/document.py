"""SQLModel implementation of DocumentStatus repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.document import DocumentStatus


class SQLModelDocumentStatusRepository:
    """SQLModel-based document status repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, document_id: int) -> Optional[DocumentStatus]:
        """Retrieve a document status row by ID."""
        with self.session_factory() as session:
            return session.get(DocumentStatus, document_id)

    def list_all(self) -> list[DocumentStatus]:
        """List every document status row."""
        with self.session_factory() as session:
            statement = select(DocumentStatus).order_by(
                DocumentStatus.student_id, DocumentStatus.document_type  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_for_student(self, student_id: int) -> list[DocumentStatus]:
        """List the documents tracked for one student."""
        with self.session_factory() as session:
            statement = (
                select(DocumentStatus)
                .where(DocumentStatus.student_id == student_id)
                .order_by(DocumentStatus.document_type)  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, document: DocumentStatus) -> DocumentStatus:
        """Create a new document status row."""
        with self.session_factory() as session:
            session.add(document)
            session.commit()
            session.refresh(document)
            return document

    def update(self, document: DocumentStatus) -> DocumentStatus:
        """Update an existing document status row."""
        with self.session_factory() as session:
            session.add(document)
            session.commit()
            session.refresh(document)
            return document

    def delete(self, document_id: int) -> None:
        """Delete a document status row by ID."""
        with self.session_factory() as session:
            document = session.get(DocumentStatus, document_id)
            if document:
                session.delete(document)
                session.commit()
