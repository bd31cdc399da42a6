"""Presentation CLI exports."""
from .check_command import CheckCommand, build_parser

__all__ = [
    "CheckCommand",
    "build_parser",
]
