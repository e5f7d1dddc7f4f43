"""CLI interface for confirming class actions."""

import asyncio
import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from ..actions import (
    ActionKind,
    ActionOrchestrator,
    ActionRequest,
    dialog_content,
)
from ..storage import ActionJournal
from ..config import config

logger = logging.getLogger(__name__)

console = Console()

TONE_STYLES = {
    "primary": "cyan",
    "danger": "red",
    "success": "green",
    "info": "blue",
}

# Actions taken by the current user on their own membership
SELF_ACTIONS = {
    "/join": ActionKind.JOIN,
    "/leave": ActionKind.LEAVE,
    "/cancel": ActionKind.CANCEL,
}

# Actions taken by an instructor on a student
STUDENT_ACTIONS = {
    "/accept": ActionKind.ACCEPT,
    "/reject": ActionKind.REJECT,
    "/complete": ActionKind.COMPLETE,
}

STATUS_STYLES = {
    "succeeded": "green",
    "failed": "red",
    "faulted": "red",
    "timed_out": "red",
}


class ClassActionCLI:
    """
    CLI interface for joining, leaving and managing classes.

    Commands:
    - /join ID [TITLE] - Apply to a class
    - /leave ID [TITLE] - Leave a class
    - /cancel ID [TITLE] - Cancel a pending application
    - /remove ID [USER] - Remove a class from your list, or a student from a class
    - /delete ID [TITLE] - Delete a class
    - /accept, /reject, /complete ID USER - Change a student's enrollment
    - /user [ID] - Show or set the acting user
    - /history - Show recent actions
    - /quit, /exit - Exit
    """

    def __init__(
        self,
        orchestrator: ActionOrchestrator,
        journal: Optional[ActionJournal] = None,
        user_id: Optional[str] = None,
        session: Optional[PromptSession] = None,
    ):
        self.orchestrator = orchestrator
        self.journal = journal
        self.user_id = user_id

        if session is None:
            config.paths.base.mkdir(parents=True, exist_ok=True)
            session = PromptSession(
                history=FileHistory(str(config.paths.history_file))
            )
        self.session = session

    async def run(self):
        """Main CLI loop."""
        console.print(Panel(
            "[bold cyan]Clover Classes[/bold cyan]\n"
            "Type /help for commands\n"
            f"User: [bright_white]{self.user_id or '(not set)'}[/bright_white]",
            title="Welcome",
            border_style="cyan",
        ))

        while True:
            try:
                user_input = await asyncio.to_thread(self.session.prompt, "> ")

                if not user_input.strip():
                    continue

                should_exit = await self._handle_command(user_input.strip())
                if should_exit:
                    break

            except KeyboardInterrupt:
                console.print("\n[yellow]Interrupted. Type /quit to exit.[/yellow]")
            except EOFError:
                break

        console.print("[green]Goodbye![/green]")

    async def _handle_command(self, command: str) -> bool:
        """
        Handle a command.

        Returns:
            True if should exit, False otherwise
        """
        parts = command.split(maxsplit=1)
        cmd = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        if cmd in ["/quit", "/exit", "/q"]:
            return True

        elif cmd == "/help":
            self._show_help()

        elif cmd == "/user":
            self._handle_user(args)

        elif cmd == "/history":
            await self._show_history()

        elif cmd in SELF_ACTIONS:
            request = self._self_request(SELF_ACTIONS[cmd], args)
            if request:
                await self.run_action(request)

        elif cmd == "/remove":
            request = self._remove_request(args)
            if request:
                await self.run_action(request)

        elif cmd == "/delete":
            request = self._delete_request(args)
            if request:
                await self.run_action(request)

        elif cmd in STUDENT_ACTIONS:
            request = self._student_request(STUDENT_ACTIONS[cmd], args)
            if request:
                await self.run_action(request)

        else:
            console.print(f"[red]Unknown command: {escape(cmd)}[/red]")
            console.print("Type /help for available commands.")

        return False

    def _require_user(self) -> Optional[str]:
        if not self.user_id:
            console.print("[red]No user set. Use /user ID first.[/red]")
        return self.user_id

    def _self_request(self, kind: ActionKind, args: str) -> Optional[ActionRequest]:
        parts = args.split(maxsplit=1)
        if not parts:
            console.print(f"[red]Usage: /{kind.value} CLASS_ID [TITLE][/red]")
            return None
        user_id = self._require_user()
        if not user_id:
            return None
        return ActionRequest(
            class_id=parts[0],
            user_id=user_id,
            kind=kind,
            class_title=parts[1] if len(parts) > 1 else None,
        )

    def _remove_request(self, args: str) -> Optional[ActionRequest]:
        parts = args.split()
        if not parts:
            console.print("[red]Usage: /remove CLASS_ID [STUDENT_ID][/red]")
            return None
        if len(parts) > 1:
            return ActionRequest(
                class_id=parts[0],
                user_id=parts[1],
                kind=ActionKind.REMOVE,
                is_instructor=True,
            )
        user_id = self._require_user()
        if not user_id:
            return None
        return ActionRequest(class_id=parts[0], user_id=user_id, kind=ActionKind.REMOVE)

    def _delete_request(self, args: str) -> Optional[ActionRequest]:
        parts = args.split(maxsplit=1)
        if not parts:
            console.print("[red]Usage: /delete CLASS_ID [TITLE][/red]")
            return None
        user_id = self._require_user()
        if not user_id:
            return None
        return ActionRequest(
            class_id=parts[0],
            user_id=user_id,
            kind=ActionKind.DELETE,
            class_title=parts[1] if len(parts) > 1 else None,
            is_instructor=True,
        )

    def _student_request(self, kind: ActionKind, args: str) -> Optional[ActionRequest]:
        parts = args.split(maxsplit=2)
        if len(parts) < 2:
            console.print(f"[red]Usage: /{kind.value} CLASS_ID STUDENT_ID [TITLE][/red]")
            return None
        return ActionRequest(
            class_id=parts[0],
            user_id=parts[1],
            kind=kind,
            class_title=parts[2] if len(parts) > 2 else None,
            is_instructor=True,
        )

    async def run_action(self, request: ActionRequest):
        """Open the dialog for a request and drive it until it closes."""
        self.orchestrator.open(request)
        content = dialog_content(request)
        style = TONE_STYLES.get(content.tone, "yellow")

        console.print(Panel(
            escape(content.description),
            title=f"[{style}]{escape(content.title)}[/{style}]",
            border_style=style,
        ))

        question = f"{content.confirm_label}? [y/n]: "
        while self.orchestrator.is_open:
            try:
                answer = await asyncio.to_thread(self.session.prompt, question)
            except (KeyboardInterrupt, EOFError):
                answer = ""

            if answer.strip().lower() not in ["y", "yes"]:
                self.orchestrator.close()
                console.print("[dim]Cancelled.[/dim]")
                break

            with console.status(content.loading_text):
                record = await self.orchestrator.confirm()

            if record and self.journal:
                await self.journal.append(record)

            # Still open means the action failed and can be retried
            question = "Retry? [y/n]: "

    def _handle_user(self, args: str):
        """Show or set the acting user."""
        if not args.strip():
            console.print(f"User: [bright_white]{self.user_id or '(not set)'}[/bright_white]")
            return
        self.user_id = args.strip()
        console.print(f"[green]Acting as {escape(self.user_id)}[/green]")

    async def _show_history(self):
        """Display recent actions."""
        if self.journal:
            entries = await self.journal.get_recent(limit=20)
        else:
            entries = [r.to_dict() for r in reversed(self.orchestrator.get_history())]

        if not entries:
            console.print("[yellow]No actions yet.[/yellow]")
            return

        table = Table(title="Recent Actions", show_header=True)
        table.add_column("When", style="dim")
        table.add_column("Action", style="cyan")
        table.add_column("Class")
        table.add_column("User")
        table.add_column("Result")

        for entry in entries:
            timestamp = ActionJournal.parse_timestamp(entry)
            status = entry.get("status", "")
            style = STATUS_STYLES.get(status, "yellow")
            table.add_row(
                timestamp.strftime("%Y-%m-%d %H:%M:%S") if timestamp else "",
                entry.get("kind", ""),
                escape(entry.get("class_title") or entry.get("class_id", "")),
                escape(entry.get("user_id", "")),
                f"[{style}]{escape(entry.get('message', ''))}[/{style}]",
            )

        console.print(table)

        if self.journal:
            stats = await self.journal.get_stats()
            console.print(
                f"[dim]Last 7 days: {stats['total']} actions, "
                f"{stats['success_rate']:.0%} succeeded[/dim]"
            )

    def _show_help(self):
        """Display help information."""
        help_table = Table(title="Available Commands", show_header=True)
        help_table.add_column("Command", style="cyan")
        help_table.add_column("Description")

        commands = [
            ("/join ID [TITLE]", "Apply to join a class"),
            ("/leave ID [TITLE]", "Leave a class"),
            ("/cancel ID [TITLE]", "Cancel a pending application"),
            ("/remove ID", "Remove a class from your list"),
            ("/remove ID STUDENT", "Remove a student from a class"),
            ("/delete ID [TITLE]", "Delete a class permanently"),
            ("/accept ID STUDENT", "Enroll a waitlisted student"),
            ("/reject ID STUDENT", "Reject a student's application"),
            ("/complete ID STUDENT", "Mark a student as completed"),
            ("/user [ID]", "Show or set the acting user"),
            ("/history", "Show recent actions"),
            ("/help", "Show this help message"),
            ("/quit, /exit, /q", "Exit"),
        ]

        for cmd, desc in commands:
            help_table.add_row(escape(cmd), desc)

        console.print(help_table)
