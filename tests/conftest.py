"""Pytest configuration and shared fixtures for DojoDesk tests.

Every test gets its own throwaway SQLite file so services and repositories
can be exercised end to end without touching the real school database.
"""

from __future__ import annotations

import itertools
import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import create_engine

from dojodesk.infra.database import create_session_factory, init_database
from dojodesk.infra.repositories import (
    SQLModelDocumentStatusRepository,
    SQLModelInstructorRepository,
    SQLModelPaymentStore,
    SQLModelPeriodDirectory,
    SQLModelStudentDirectory,
    SQLModelTrainingClassRepository,
)
from dojodesk.models import FeePeriod, Payment, Student

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with every table created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    init_database(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the application context wires up."""

    return create_session_factory(db_engine)


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def student_repo(session_factory):
    return SQLModelStudentDirectory(session_factory)


@pytest.fixture
def instructor_repo(session_factory):
    return SQLModelInstructorRepository(session_factory)


@pytest.fixture
def class_repo(session_factory):
    return SQLModelTrainingClassRepository(session_factory)


@pytest.fixture
def document_repo(session_factory):
    return SQLModelDocumentStatusRepository(session_factory)


@pytest.fixture
def period_repo(session_factory):
    return SQLModelPeriodDirectory(session_factory)


@pytest.fixture
def payment_store(session_factory):
    return SQLModelPaymentStore(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def student_factory(student_repo):
    """Factory for persisted students with unique DNIs."""

    dni_numbers = itertools.count(30_000_001)

    def _create_student(
        full_name: str = "Test Student",
        dni: str | None = None,
        birth_date: date = date(2000, 5, 17),
        enrolled_on: date = date(2024, 1, 2),
        active: bool = True,
    ) -> Student:
        student = Student(
            full_name=full_name,
            dni=dni or str(next(dni_numbers)),
            birth_date=birth_date,
            enrolled_on=enrolled_on,
            active=active,
        )
        return student_repo.create(student)

    return _create_student


@pytest.fixture
def period_factory(period_repo):
    """Factory for persisted fee periods; defaults to March 2024."""

    def _create_period(
        name: str = "March 2024",
        starts_on: date = date(2024, 3, 1),
        ends_on: date = date(2024, 3, 31),
        due_on: date = date(2024, 3, 10),
        base_amount: float = 100.0,
        surcharge_amount: float = 20.0,
    ) -> FeePeriod:
        period = FeePeriod(
            name=name,
            starts_on=starts_on,
            ends_on=ends_on,
            due_on=due_on,
            base_amount=base_amount,
            surcharge_amount=surcharge_amount,
        )
        return period_repo.create(period)

    return _create_period


@pytest.fixture
def payment_factory(payment_store):
    """Factory appending payments straight to the store, skipping validation."""

    def _create_payment(
        student: Student,
        period: FeePeriod,
        amount: float,
        paid_on: date = date(2024, 3, 5),
        method: str = "cash",
        surcharge_charged: float = 0.0,
    ) -> Payment:
        payment = Payment(
            student_id=student.id,
            period_id=period.id,
            amount=amount,
            paid_on=paid_on,
            method=method,
            surcharge_charged=surcharge_charged,
        )
        return payment_store.append(payment)

    return _create_payment
