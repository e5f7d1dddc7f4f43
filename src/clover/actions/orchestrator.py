"""Confirmation-gated execution of class membership actions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional
import asyncio
import inspect
import logging

from .notifications import Notifier
from .request import ActionRequest
from .table import dispatch, get_spec
from ..clients.base import BaseClassClient

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to complete action"
UNEXPECTED_ERROR = "An unexpected error occurred"
TIMED_OUT = "The request timed out"


class _DispatchTimedOut(Exception):
    """The configured dispatch timeout expired."""


class DialogState(Enum):
    """Visible state of the confirmation dialog."""

    IDLE = "idle"
    AWAITING = "awaiting"
    SUBMITTING = "submitting"


class ActionStatus(Enum):
    """How a confirmed action ended."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    FAULTED = "faulted"
    TIMED_OUT = "timed_out"


@dataclass
class ActionRecord:
    """Result of one confirm() call."""

    request: ActionRequest
    status: ActionStatus
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def succeeded(self) -> bool:
        return self.status == ActionStatus.SUCCEEDED

    def to_dict(self) -> dict:
        return {
            **self.request.to_dict(),
            "status": self.status.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


class ActionOrchestrator:
    """
    Gates a class membership change behind a confirmation step.

    Lifecycle:
    - open(request) stages a request and shows the dialog
    - confirm() performs exactly one remote call for the staged request
    - close() hides the dialog and discards the request, at any time

    A successful call closes the dialog and runs the completion callback.
    A failed call, a raised fault or a timeout leaves the dialog open for a
    retry or a cancel. Every confirm() that reaches the remote side emits
    exactly one notification, and the loading flag is always released.
    """

    def __init__(
        self,
        client: BaseClassClient,
        notifier: Notifier,
        on_success: Optional[Callable[[], Any]] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.notifier = notifier
        self.on_success = on_success
        self.timeout = timeout

        self._is_open = False
        self._is_loading = False
        self._pending: Optional[ActionRequest] = None
        # Bumped by close() so a late result cannot touch a newer dialog
        self._generation = 0
        self._history: list[ActionRecord] = []

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def pending(self) -> Optional[ActionRequest]:
        return self._pending

    @property
    def state(self) -> DialogState:
        if not self._is_open:
            return DialogState.IDLE
        if self._is_loading:
            return DialogState.SUBMITTING
        return DialogState.AWAITING

    def open(self, request: ActionRequest):
        """Stage a request and show the dialog, replacing any staged request."""
        if not isinstance(request, ActionRequest):
            raise TypeError(
                f"open() expects an ActionRequest, got {type(request).__name__}"
            )
        self._pending = request
        self._is_open = True

    def close(self):
        """Hide the dialog and discard the staged request.

        Does not cancel a call already in flight; its result is still
        reported but no longer changes this dialog.
        """
        self._generation += 1
        self._is_open = False
        self._is_loading = False
        self._pending = None

    async def confirm(self) -> Optional[ActionRecord]:
        """
        Perform the staged action.

        Returns:
            The record of what happened, or None when nothing was staged or
            a call is already in flight.
        """
        request = self._pending
        if request is None:
            return None
        if self._is_loading:
            logger.warning(
                "Ignoring confirm for %s on class %s: action already in flight",
                request.kind.value,
                request.class_id,
            )
            return None

        generation = self._generation
        spec = get_spec(request.kind)
        self._is_loading = True
        try:
            try:
                outcome = await self._dispatch(request)
            except _DispatchTimedOut:
                logger.warning(
                    "%s on class %s timed out after %ss",
                    request.kind.value,
                    request.class_id,
                    self.timeout,
                )
                record = ActionRecord(request, ActionStatus.TIMED_OUT, TIMED_OUT)
                self._notify_failure(record.message)
            except Exception:
                logger.exception(
                    "Failed to complete class action %s on class %s",
                    request.kind.value,
                    request.class_id,
                )
                record = ActionRecord(request, ActionStatus.FAULTED, UNEXPECTED_ERROR)
                self._notify_failure(record.message)
            else:
                if outcome.success:
                    record = ActionRecord(
                        request, ActionStatus.SUCCEEDED, spec.success_message
                    )
                    self._notify_success(record.message)
                    if generation == self._generation:
                        self.close()
                    await self._run_on_success()
                else:
                    record = ActionRecord(
                        request,
                        ActionStatus.FAILED,
                        outcome.error or GENERIC_FAILURE,
                    )
                    logger.info(
                        "%s on class %s was refused: %s",
                        request.kind.value,
                        request.class_id,
                        record.message,
                    )
                    self._notify_failure(record.message)
        finally:
            if generation == self._generation:
                self._is_loading = False

        self._history.append(record)
        return record

    async def _dispatch(self, request: ActionRequest):
        call = dispatch(self.client, request)
        if self.timeout is None:
            return await call

        # A TimeoutError raised by the client itself is a fault, not an expiry
        task = asyncio.ensure_future(call)
        try:
            done, _ = await asyncio.wait({task}, timeout=self.timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if not done:
            task.cancel()
            raise _DispatchTimedOut()
        return task.result()

    async def _run_on_success(self):
        if self.on_success is None:
            return
        try:
            result = self.on_success()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Completion callback failed")

    def _notify_success(self, message: str):
        try:
            self.notifier.notify_success(message)
        except Exception:
            logger.exception("Could not deliver success notification")

    def _notify_failure(self, message: str):
        try:
            self.notifier.notify_failure(message)
        except Exception:
            logger.exception("Could not deliver failure notification")

    def get_history(self) -> list[ActionRecord]:
        """Get the records of past confirmations."""
        return self._history.copy()

    def clear_history(self):
        self._history.clear()

    @property
    def succeeded_count(self) -> int:
        return sum(1 for r in self._history if r.succeeded)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self._history if not r.succeeded)
