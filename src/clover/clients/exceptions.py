"""Custom exceptions for class API clients."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ClassApiError(Exception):
    """
    Raised when the class API cannot be reached at all.

    A response the server did send, even an error response, is reported as
    a failed Outcome instead. This exception covers connection refusals,
    DNS failures and transport timeouts.
    """
    operation: str
    message: str
    url: Optional[str] = None

    def __str__(self):
        target = f" ({self.url})" if self.url else ""
        return f"Class API unavailable during {self.operation}{target}: {self.message}"
