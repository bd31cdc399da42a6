"""Presentation layer - command-line interface."""
from .cli import CheckCommand

__all__ = [
    "CheckCommand",
]
