"""Base class API client abstraction."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EnrollmentStatus(Enum):
    """Enrollment status of a student in a class."""
    WAITLISTED = "WAITLISTED"
    ENROLLED = "ENROLLED"
    COMPLETED = "COMPLETED"
    REMOVED = "REMOVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Outcome:
    """Result of a remote membership or class operation."""
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "Outcome":
        return cls(success=True)

    @classmethod
    def failed(cls, error: Optional[str] = None) -> "Outcome":
        return cls(success=False, error=error)


class BaseClassClient(ABC):
    """
    Abstract remote collaborator for class membership changes.

    Implementations resolve every call to an Outcome. A call that cannot
    reach the remote side raises instead (see ClassApiError).
    """

    @abstractmethod
    async def register_membership(self, user_id: str, class_id: str) -> Outcome:
        """Add the user to the class (waitlisted until accepted)."""
        pass

    @abstractmethod
    async def unregister_membership(self, user_id: str, class_id: str) -> Outcome:
        """End the membership between the user and the class."""
        pass

    @abstractmethod
    async def delete_resource(self, class_id: str) -> Outcome:
        """Permanently delete the class."""
        pass

    @abstractmethod
    async def update_enrollment_status(
        self,
        class_id: str,
        user_id: str,
        status: EnrollmentStatus,
    ) -> Outcome:
        """Move a student to a new enrollment status."""
        pass

    async def aclose(self):
        """Release transport resources, if any."""
        return None
