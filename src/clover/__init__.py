"""Clover class dashboard client: confirmation-gated class membership actions."""

__version__ = "0.1.0"
