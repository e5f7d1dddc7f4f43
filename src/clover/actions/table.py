"""Routing of each action kind to its remote operation and success message."""

from dataclasses import dataclass
from typing import Awaitable, Callable

from .request import ActionKind, ActionRequest
from ..clients.base import BaseClassClient, EnrollmentStatus, Outcome

Operation = Callable[[BaseClassClient, ActionRequest], Awaitable[Outcome]]


@dataclass(frozen=True)
class ActionSpec:
    """Remote operation and user-facing message for one action kind."""

    operation: Operation
    success_message: str


def _register(client: BaseClassClient, request: ActionRequest) -> Awaitable[Outcome]:
    return client.register_membership(request.user_id, request.class_id)


def _unregister(client: BaseClassClient, request: ActionRequest) -> Awaitable[Outcome]:
    return client.unregister_membership(request.user_id, request.class_id)


def _delete(client: BaseClassClient, request: ActionRequest) -> Awaitable[Outcome]:
    return client.delete_resource(request.class_id)


def _set_enrollment(status: EnrollmentStatus) -> Operation:
    def operation(client: BaseClassClient, request: ActionRequest) -> Awaitable[Outcome]:
        return client.update_enrollment_status(request.class_id, request.user_id, status)

    operation.__name__ = f"_set_enrollment_{status.value.lower()}"
    return operation


# Leave, cancel and remove share one remote call; only the message differs
ACTIONS: dict[ActionKind, ActionSpec] = {
    ActionKind.JOIN: ActionSpec(_register, "Successfully joined class!"),
    ActionKind.DELETE: ActionSpec(_delete, "Class deleted successfully!"),
    ActionKind.LEAVE: ActionSpec(_unregister, "Successfully left class!"),
    ActionKind.CANCEL: ActionSpec(_unregister, "Successfully cancelled application!"),
    ActionKind.REMOVE: ActionSpec(_unregister, "Successfully removed from list!"),
    ActionKind.ACCEPT: ActionSpec(
        _set_enrollment(EnrollmentStatus.ENROLLED),
        "Successfully enrolled student!",
    ),
    ActionKind.REJECT: ActionSpec(
        _set_enrollment(EnrollmentStatus.REJECTED),
        "Successfully rejected student!",
    ),
    ActionKind.COMPLETE: ActionSpec(
        _set_enrollment(EnrollmentStatus.COMPLETED),
        "Successfully marked student as complete!",
    ),
}


def _check_exhaustive():
    missing = [kind.value for kind in ActionKind if kind not in ACTIONS]
    if missing:
        raise RuntimeError(f"No action table entry for: {', '.join(missing)}")


_check_exhaustive()


def get_spec(kind: ActionKind) -> ActionSpec:
    return ACTIONS[kind]


def dispatch(client: BaseClassClient, request: ActionRequest) -> Awaitable[Outcome]:
    """Start the remote operation for a request."""
    return ACTIONS[request.kind].operation(client, request)
