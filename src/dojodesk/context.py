"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import (
    SQLModelDocumentStatusRepository,
    SQLModelInstructorRepository,
    SQLModelPaymentStore,
    SQLModelPeriodDirectory,
    SQLModelStudentDirectory,
    SQLModelTrainingClassRepository,
)


@dataclass
class AppContext:
    """Configuration, session factory and one repository per record type."""

    config: BaseConfig
    session_factory: Callable[[], Session]

    students: SQLModelStudentDirectory
    instructors: SQLModelInstructorRepository
    classes: SQLModelTrainingClassRepository
    documents: SQLModelDocumentStatusRepository
    periods: SQLModelPeriodDirectory
    payments: SQLModelPaymentStore


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the engine, make sure the schema exists and wire repositories."""

    if config is None:
        config = BaseConfig()

    _engine, session_factory = bootstrap_database(config)

    return AppContext(
        config=config,
        session_factory=session_factory,
        students=SQLModelStudentDirectory(session_factory),
        instructors=SQLModelInstructorRepository(session_factory),
        classes=SQLModelTrainingClassRepository(session_factory),
        documents=SQLModelDocumentStatusRepository(session_factory),
        periods=SQLModelPeriodDirectory(session_factory),
        payments=SQLModelPaymentStore(session_factory),
    )
