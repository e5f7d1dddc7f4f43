"""Test doubles for the class API and notification channel."""

import asyncio
from typing import Optional

from clover.clients.base import BaseClassClient, EnrollmentStatus, Outcome


class FakeClassClient(BaseClassClient):
    """Records every call and answers with a scripted outcome or error."""

    def __init__(
        self,
        outcome: Optional[Outcome] = None,
        error: Optional[BaseException] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.outcome = outcome or Outcome.ok()
        self.error = error
        self.gate = gate
        self.calls: list[tuple] = []

    async def _answer(self, call: tuple) -> Outcome:
        self.calls.append(call)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.outcome

    async def register_membership(self, user_id, class_id):
        return await self._answer(("register", user_id, class_id))

    async def unregister_membership(self, user_id, class_id):
        return await self._answer(("unregister", user_id, class_id))

    async def delete_resource(self, class_id):
        return await self._answer(("delete", class_id))

    async def update_enrollment_status(self, class_id, user_id, status: EnrollmentStatus):
        return await self._answer(("enrollment", class_id, user_id, status))


class RecordingNotifier:
    """Collects notifications instead of showing them."""

    def __init__(self):
        self.successes: list[str] = []
        self.failures: list[str] = []

    def notify_success(self, message: str) -> None:
        self.successes.append(message)

    def notify_failure(self, message: str) -> None:
        self.failures.append(message)

    @property
    def total(self) -> int:
        return len(self.successes) + len(self.failures)
