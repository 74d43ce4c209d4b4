"""Repository tests against a real SQLite database."""

from __future__ import annotations

from datetime import date

from dojodesk.models import Student


def test_student_lookup_by_dni(student_repo, student_factory):
    student = student_factory("Ana", dni="30111222")

    assert student_repo.get_by_dni("30111222").id == student.id
    assert student_repo.get_by_dni("99999999") is None
    assert student_repo.get_by_id(student.id).full_name == "Ana"


def test_student_listing_sorted_by_name(student_repo, student_factory):
    student_factory("Carla")
    student_factory("Ana")
    student_factory("Ben", active=False)

    assert [s.full_name for s in student_repo.list_all()] == ["Ana", "Ben", "Carla"]
    assert [s.full_name for s in student_repo.list_all(active_only=True)] == ["Ana", "Carla"]


def test_student_update(student_repo):
    student = student_repo.create(
        Student(full_name="Ana", dni="30111222", birth_date=date(2000, 1, 1), enrolled_on=date(2024, 1, 1))
    )
    student.address = "Calle 1"
    student_repo.update(student)

    assert student_repo.get_by_id(student.id).address == "Calle 1"


def test_payment_queries(payment_store, payment_factory, student_factory, period_factory):
    ana = student_factory("Ana")
    ben = student_factory("Ben")
    march = period_factory()
    first = payment_factory(ana, march, 60, paid_on=date(2024, 3, 9))
    second = payment_factory(ana, march, 40, paid_on=date(2024, 3, 2))
    payment_factory(ben, march, 100, paid_on=date(2024, 4, 1))

    assert [p.id for p in payment_store.list_for(ana.id, march.id)] == [second.id, first.id]
    assert len(payment_store.list_for_student(ben.id)) == 1
    assert len(payment_store.list_in_month(2024, 3)) == 2
    assert len(payment_store.list_in_month(2024, 4)) == 1
    assert payment_store.count_for_period(march.id) == 3
    assert payment_store.count_for_period(march.id + 1) == 0
    assert payment_store.get_by_id(first.id).amount == 60
