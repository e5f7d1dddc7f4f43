"""Storage layer for the action journal."""

from .journal import ActionJournal

__all__ = ["ActionJournal"]
