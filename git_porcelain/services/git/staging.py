"""Staging, committing and discarding changes."""

from typing import Dict, Iterable

from git_porcelain.constants import NIL_TREE_SHA
from git_porcelain.logging_config import get_logger
from git_porcelain.models.index import IndexStatus
from git_porcelain.parsers.diff_index import parse_diff_index
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.shell import quote

logger = get_logger(__name__)


def _quote_all(files: Iterable) -> str:
    return " ".join(quote(path) for path in files)


class StagingService(GitCommandService):
    """Service for index and working tree changes."""

    def stage(self, files: Iterable) -> None:
        paths = _quote_all(files)
        if not paths:
            return
        self._run_checked(f"add -- {paths}", "stage")
        logger.info(f"Staged {paths}")

    def unstage(self, files: Iterable) -> None:
        paths = _quote_all(files)
        if not paths:
            return
        self._run_checked(f"restore --staged -- {paths}", "unstage")
        logger.info(f"Unstaged {paths}")

    def commit(self, message: str) -> None:
        self._run_checked(f"commit -m {quote(message)}", "commit")
        logger.info("Created commit")

    def discard_file_changes(self, path) -> None:
        """Throw away unstaged changes to one file."""
        self._run_checked(f"restore -- {quote(path)}", "discard_file_changes")
        logger.debug(f"Discarded changes to {path}")

    def discard_project_changes(self) -> None:
        """Throw away every unstaged change in the working tree."""
        self._run_checked("restore .", "discard_project_changes")
        logger.debug("Discarded all unstaged changes")

    def has_head(self) -> bool:
        """False for a repository without any commit yet."""
        result = self._execute("rev-parse --verify -q HEAD")
        self._ensure_repository(result.output)
        return result.ok

    def get_index_changes(self) -> Dict[str, IndexStatus]:
        """Staged changes relative to HEAD, keyed by path.

        An unborn HEAD is diffed against the empty tree, so everything staged
        shows as added.
        """
        base = "HEAD" if self.has_head() else NIL_TREE_SHA
        result = self._run_checked(
            f"diff-index --cached --name-status --no-renames -z {base} --",
            "get_index_changes",
        )
        return parse_diff_index(result.stdout)
