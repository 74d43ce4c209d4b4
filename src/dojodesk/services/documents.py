"""Tracking of the paperwork each student has to hand in."""

from __future__ import annotations

from datetime import datetime, timezone

from ..config import BaseConfig
from ..domain.repositories import DocumentStatusRepository, StudentDirectory
from ..errors import NotFound, ValidationError
from ..logging_config import get_logger
from ..models.document import DocumentStatus
from . import validation

logger = get_logger("documents")


def _normalize_status(status: str) -> str:
    value = validation.require_text(status, "Status").lower()
    if value not in BaseConfig.DOCUMENT_STATUSES:
        allowed = ", ".join(BaseConfig.DOCUMENT_STATUSES)
        raise ValidationError(f"Status must be one of: {allowed}.")
    return value


def register_document(
    *,
    student_id: int,
    document_type: str,
    status: str = "pending",
    notes: str = "",
    documents: DocumentStatusRepository,
    students: StudentDirectory,
) -> DocumentStatus:
    """Start tracking a document for an existing student."""

    validation.ensure_positive_id(student_id, "Student id")
    document_type = validation.require_text(document_type, "Document type")
    status = _normalize_status(status)
    if students.get_by_id(student_id) is None:
        raise NotFound("Student", student_id)
    document = documents.create(
        DocumentStatus(
            student_id=student_id,
            document_type=document_type,
            status=status,
            notes=(notes or "").strip(),
        )
    )
    logger.info(
        "Document tracked",
        extra={"document_id": document.id, "student_id": student_id, "status": status},
    )
    return document


def get_document(document_id: int, *, documents: DocumentStatusRepository) -> DocumentStatus:
    validation.ensure_positive_id(document_id, "Document id")
    document = documents.get_by_id(document_id)
    if document is None:
        raise NotFound("Document", document_id)
    return document


def list_documents(*, documents: DocumentStatusRepository) -> list[DocumentStatus]:
    return documents.list_all()


def list_documents_for_student(
    student_id: int, *, documents: DocumentStatusRepository
) -> list[DocumentStatus]:
    validation.ensure_positive_id(student_id, "Student id")
    return documents.list_for_student(student_id)


def update_document(
    document: DocumentStatus, *, documents: DocumentStatusRepository
) -> DocumentStatus:
    """Persist a changed status or notes; the owning student cannot change."""

    if document.id is None:
        raise ValidationError("Document id is required for an update.")
    current = get_document(document.id, documents=documents)
    if current.student_id != document.student_id:
        raise ValidationError("A document cannot be moved to another student.")
    document.document_type = validation.require_text(document.document_type, "Document type")
    document.status = _normalize_status(document.status)
    document.notes = (document.notes or "").strip()
    document.updated_at = datetime.now(timezone.utc)
    return documents.update(document)


def delete_document(document_id: int, *, documents: DocumentStatusRepository) -> None:
    get_document(document_id, documents=documents)
    documents.delete(document_id)
