"""Repository protocol definitions for domain layer."""

from .document import DocumentStatusRepository
from .instructor import InstructorRepository
from .payment import PaymentStore
from .period import PeriodDirectory
from .student import StudentDirectory
from .training_class import TrainingClassRepository

__all__ = [
    "DocumentStatusRepository",
    "InstructorRepository",
    "PaymentStore",
    "PeriodDirectory",
    "StudentDirectory",
    "TrainingClassRepository",
]
