"""Confirmation copy shown for each action kind."""

from dataclasses import dataclass

from .request import ActionKind, ActionRequest


@dataclass(frozen=True)
class DialogContent:
    """Text for a confirmation prompt."""

    title: str
    description: str
    action_text: str
    loading_text: str
    tone: str = "danger"  # primary, danger, success, info

    @property
    def confirm_label(self) -> str:
        return f"Yes, {self.action_text}"


def dialog_content(request: ActionRequest) -> DialogContent:
    """Build the confirmation copy for a request."""
    name = request.class_title or "this class"
    kind = request.kind

    if kind is ActionKind.JOIN:
        return DialogContent(
            title="Join Class",
            description=(
                f'Are you sure you want to join "{name}"? You\'ll be added to the '
                "waitlist and the instructor will review your application."
            ),
            action_text="join",
            loading_text="Joining...",
            tone="primary",
        )
    if kind is ActionKind.LEAVE:
        return DialogContent(
            title="Leave Class",
            description=(
                f'Are you sure you want to leave "{name}"? You\'ll lose access to '
                "all course materials and progress."
            ),
            action_text="leave",
            loading_text="Leaving...",
        )
    if kind is ActionKind.CANCEL:
        return DialogContent(
            title="Cancel Application",
            description=(
                f'Are you sure you want to cancel your application for "{name}"? '
                "You can reapply later if you change your mind."
            ),
            action_text="cancel your application",
            loading_text="Cancelling...",
        )
    if kind is ActionKind.REMOVE:
        if request.is_instructor:
            return DialogContent(
                title="Remove Student",
                description=(
                    f'Are you sure you want to remove this student from "{name}"? '
                    "They will lose access to all course materials and progress."
                ),
                action_text="remove student",
                loading_text="Removing...",
            )
        return DialogContent(
            title="Remove from List",
            description=(
                f'Are you sure you want to remove "{name}" from your list? This will '
                "permanently delete this class from your records."
            ),
            action_text="remove from list",
            loading_text="Removing...",
        )
    if kind is ActionKind.DELETE:
        return DialogContent(
            title="Delete Class",
            description=(
                f'Are you sure you want to permanently delete "{name}"? This action '
                "cannot be undone and will remove all class data, including "
                "enrolled students."
            ),
            action_text="delete permanently",
            loading_text="Deleting...",
        )
    if kind is ActionKind.ACCEPT:
        return DialogContent(
            title="Accept Student",
            description=(
                f'Are you sure you want to accept this student into "{name}"? They '
                "will be enrolled and gain full access to the course."
            ),
            action_text="accept student",
            loading_text="Accepting...",
            tone="success",
        )
    if kind is ActionKind.REJECT:
        return DialogContent(
            title="Reject Student",
            description=(
                f"Are you sure you want to reject this student's application for "
                f'"{name}"? They will be notified of this decision.'
            ),
            action_text="reject student",
            loading_text="Rejecting...",
        )
    if kind is ActionKind.COMPLETE:
        return DialogContent(
            title="Mark as Complete",
            description=(
                f'Are you sure you want to mark this student as completed for "{name}"? '
                "This indicates they have successfully finished the course."
            ),
            action_text="mark as complete",
            loading_text="Updating...",
            tone="info",
        )

    raise ValueError(f"Unsupported action kind: {kind!r}")
