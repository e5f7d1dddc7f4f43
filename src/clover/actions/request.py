"""Action kinds and the immutable request staged for confirmation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionKind(Enum):
    """Membership and class changes that require confirmation."""

    JOIN = "join"
    DELETE = "delete"
    LEAVE = "leave"
    CANCEL = "cancel"
    REMOVE = "remove"
    ACCEPT = "accept"
    REJECT = "reject"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ActionRequest:
    """
    A pending action on a class.

    Attributes:
        class_id: Opaque class identifier
        user_id: Opaque identifier of the user whose membership changes
        kind: What to do
        class_title: Shown in the dialog only, never used for dispatch
        is_instructor: Whether an instructor is acting on a student
    """

    class_id: str
    user_id: str
    kind: ActionKind
    class_title: Optional[str] = None
    is_instructor: bool = False

    def __post_init__(self):
        for name in ("class_id", "user_id"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string")
        if not isinstance(self.kind, ActionKind):
            # Accept the wire value ("join", ...); unknown values raise ValueError
            object.__setattr__(self, "kind", ActionKind(self.kind))

    def to_dict(self) -> dict:
        return {
            "class_id": self.class_id,
            "user_id": self.user_id,
            "kind": self.kind.value,
            "class_title": self.class_title,
            "is_instructor": self.is_instructor,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ActionRequest":
        return cls(
            class_id=data["class_id"],
            user_id=data["user_id"],
            kind=ActionKind(data["kind"]),
            class_title=data.get("class_title"),
            is_instructor=data.get("is_instructor", False),
        )
