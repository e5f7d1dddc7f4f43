"""Remote collaborators for class membership changes."""

from .base import BaseClassClient, EnrollmentStatus, Outcome
from .classes_client import ClassesClient
from .exceptions import ClassApiError

__all__ = [
    "BaseClassClient",
    "EnrollmentStatus",
    "Outcome",
    "ClassesClient",
    "ClassApiError",
]
