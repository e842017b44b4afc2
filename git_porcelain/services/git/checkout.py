"""Checkout of branches and paths."""

from enum import Enum
from typing import Iterable

from git_porcelain.constants import CHECKOUT_SUCCESS_MARKERS
from git_porcelain.logging_config import get_logger
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import output_error
from git_porcelain.services.shell import quote

logger = get_logger(__name__)


class ManualConflictResolution(Enum):
    """Which side of a conflicted file to keep."""
    OURS = "ours"
    THEIRS = "theirs"


class CheckoutService(GitCommandService):
    """Service for switching branches and restoring paths."""

    def checkout_branch(self, name: str) -> None:
        """Check out a branch.

        Git reports a successful switch on stderr with one of a few fixed
        phrases; anything else is treated as a failure.

        Raises:
            NotARepositoryError: the directory is not a repository
            OutputError: the switch did not happen
        """
        result = self._execute(f"checkout {quote(name)}")
        output = self._ensure_repository(result.output)

        if not any(marker in output for marker in CHECKOUT_SUCCESS_MARKERS):
            raise output_error(output, "checkout_branch")

        logger.info(f"Checked out {name}")

    def checkout_paths(self, paths: Iterable) -> None:
        """Restore paths to their state at HEAD."""
        paths = [quote(path) for path in paths]
        if not paths:
            return
        self._run_checked(f"checkout HEAD -- {' '.join(paths)}", "checkout_paths")
        logger.debug(f"Restored {len(paths)} path(s) from HEAD")

    def checkout_conflicted_file(self, path, resolution: ManualConflictResolution) -> None:
        """Resolve a conflicted file by taking one side of the merge."""
        self._run_checked(
            f"checkout --{resolution.value} -- {quote(path)}",
            "checkout_conflicted_file",
        )
