"""Notification channel for action outcomes."""

from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape


class Notifier(Protocol):
    """Fire-and-forget user notifications."""

    def notify_success(self, message: str) -> None:
        ...

    def notify_failure(self, message: str) -> None:
        ...


class ConsoleNotifier:
    """Print notifications to the terminal as coloured toasts."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def notify_success(self, message: str) -> None:
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def notify_failure(self, message: str) -> None:
        self.console.print(f"[red]✗ {escape(message)}[/red]")
