"""Class timetable and document tracking service tests."""

from __future__ import annotations

import pytest

from dojodesk.errors import NotFound, ValidationError
from dojodesk.services import classes, documents


def test_create_class_and_toggle(class_repo):
    karate = classes.create_class(
        name=" Karate kids ", schedule="Tue/Thu 17:00", max_capacity="20", classes=class_repo
    )

    assert karate.name == "Karate kids"
    assert karate.max_capacity == 20

    classes.deactivate_class(karate.id, classes=class_repo)
    assert classes.list_classes(classes=class_repo, active_only=True) == []
    assert classes.activate_class(karate.id, classes=class_repo).active is True


@pytest.mark.parametrize(
    "name, schedule, capacity",
    [("", "Mon 18:00", 10), ("Judo", "", 10), ("Judo", "Mon 18:00", 0)],
)
def test_create_class_validation(class_repo, name, schedule, capacity):
    with pytest.raises(ValidationError):
        classes.create_class(name=name, schedule=schedule, max_capacity=capacity, classes=class_repo)


def test_update_class(class_repo):
    judo = classes.create_class(name="Judo", schedule="Mon 18:00", max_capacity=12, classes=class_repo)
    judo.schedule = "Mon/Wed 18:00"

    assert classes.update_class(judo, classes=class_repo).schedule == "Mon/Wed 18:00"
    with pytest.raises(NotFound):
        classes.get_class(99, classes=class_repo)


def test_register_document(document_repo, student_repo, student_factory):
    student = student_factory()

    doc = documents.register_document(
        student_id=student.id,
        document_type="Medical certificate",
        documents=document_repo,
        students=student_repo,
    )

    assert doc.status == "pending"
    assert [d.id for d in documents.list_documents_for_student(student.id, documents=document_repo)] == [
        doc.id
    ]


def test_register_document_checks_student_and_status(document_repo, student_repo, student_factory):
    with pytest.raises(NotFound):
        documents.register_document(
            student_id=5, document_type="Id copy", documents=document_repo, students=student_repo
        )
    student = student_factory()
    with pytest.raises(ValidationError, match="Status"):
        documents.register_document(
            student_id=student.id,
            document_type="Id copy",
            status="lost",
            documents=document_repo,
            students=student_repo,
        )


def test_update_and_delete_document(document_repo, student_repo, student_factory):
    student = student_factory()
    other = student_factory("Other")
    doc = documents.register_document(
        student_id=student.id, document_type="Id copy", documents=document_repo, students=student_repo
    )
    original_stamp = doc.updated_at

    doc.status = "Delivered"
    updated = documents.update_document(doc, documents=document_repo)
    assert updated.status == "delivered"
    assert updated.updated_at >= original_stamp.replace(tzinfo=updated.updated_at.tzinfo)

    doc.student_id = other.id
    with pytest.raises(ValidationError):
        documents.update_document(doc, documents=document_repo)

    documents.delete_document(doc.id, documents=document_repo)
    assert documents.list_documents(documents=document_repo) == []
    with pytest.raises(NotFound):
        documents.get_document(doc.id, documents=document_repo)
