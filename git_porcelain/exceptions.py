"""Custom exceptions for git-porcelain"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from git_porcelain.services.git.diagnostics import GitErrorKind


class GitPorcelainError(Exception):
    """Base exception for all git-porcelain errors."""
    pass


class GitNotFoundError(GitPorcelainError):
    """Raised when the git executable or the working directory cannot be found."""

    def __init__(self, command: str, message: Optional[str] = None):
        self.command = command
        self.message = message

        error_msg = f"Could not run '{command}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(GitPorcelainError):
    """Raised when git reports that the directory is not a repository."""

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory

        error_msg = "Not a git repository"
        if directory:
            error_msg += f": {directory}"

        super().__init__(error_msg)


class OutputError(GitPorcelainError):
    """Raised when command output signals a failure.

    Carries the raw diagnostic text so it can be shown to the user as is.
    """

    def __init__(
        self,
        output: str,
        operation: Optional[str] = None,
        kind: Optional["GitErrorKind"] = None,
    ):
        self.output = output
        self.operation = operation
        self.kind = kind

        error_msg = f"Git operation '{operation}' failed" if operation else "Git command failed"
        if kind is not None:
            error_msg += f" ({kind.name.lower()})"
        if output.strip():
            error_msg += f": {output.strip()}"

        super().__init__(error_msg)


class IndexParseError(GitPorcelainError):
    """Raised when a status or diff-index code cannot be parsed."""

    def __init__(self, status: str, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Unknown index status: {status!r}")


class UnknownIndexStatusError(IndexParseError):
    """Status code outside the known A/C/D/M/R/T/U/X set."""
    pass


class NoRenameIndexStatusError(IndexParseError):
    """Rename or copy status found where renames were disabled."""

    def __init__(self, status: str):
        super().__init__(status, f"Invalid index status for no-rename index status: {status!r}")


class URLDecodeError(GitPorcelainError):
    """Raised when a parsed filename cannot be turned into a path."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Failed to decode a path from status line: {line!r}")
