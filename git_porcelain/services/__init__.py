"""Service modules for git-porcelain."""

from .shell import CommandResult, ShellClient, format_command, quote
from .display_service import DisplayService

__all__ = [
    "CommandResult",
    "ShellClient",
    "format_command",
    "quote",
    "DisplayService",
]
