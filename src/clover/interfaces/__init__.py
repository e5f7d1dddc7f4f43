"""User-facing interfaces."""

from .cli import ClassActionCLI

__all__ = ["ClassActionCLI"]
