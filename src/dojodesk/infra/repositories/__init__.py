"""Concrete repository implementations using SQLModel."""

from .document import SQLModelDocumentStatusRepository
from .instructor import SQLModelInstructorRepository
from .payment import SQLModelPaymentStore
from .period import SQLModelPeriodDirectory
from .student import SQLModelStudentDirectory
from .training_class import SQLModelTrainingClassRepository

__all__ = [
    "SQLModelDocumentStatusRepository",
    "SQLModelInstructorRepository",
    "SQLModelPaymentStore",
    "SQLModelPeriodDirectory",
    "SQLModelStudentDirectory",
    "SQLModelTrainingClassRepository",
]
