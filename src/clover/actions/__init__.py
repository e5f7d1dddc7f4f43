"""Confirmation-gated class membership actions."""

from .request import ActionKind, ActionRequest
from .table import ACTIONS, ActionSpec, dispatch, get_spec
from .dialog import DialogContent, dialog_content
from .notifications import ConsoleNotifier, Notifier
from .orchestrator import (
    ActionOrchestrator,
    ActionRecord,
    ActionStatus,
    DialogState,
)

__all__ = [
    # Requests
    "ActionKind",
    "ActionRequest",
    # Routing
    "ACTIONS",
    "ActionSpec",
    "dispatch",
    "get_spec",
    # Dialog copy
    "DialogContent",
    "dialog_content",
    # Notifications
    "ConsoleNotifier",
    "Notifier",
    # Orchestration
    "ActionOrchestrator",
    "ActionRecord",
    "ActionStatus",
    "DialogState",
]
