"""SQLModel table exports."""

from .document import DocumentStatus
from .instructor import Instructor
from .payment import Payment
from .period import FeePeriod
from .student import Student
from .training_class import TrainingClass
from .user import User

__all__ = [
    "DocumentStatus",
    "FeePeriod",
    "Instructor",
    "Payment",
    "Student",
    "TrainingClass",
    "User",
]
