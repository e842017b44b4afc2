"""Commit history."""

from typing import List, Optional

from git_porcelain.constants import LOG_PRETTY_FORMAT
from git_porcelain.logging_config import get_logger
from git_porcelain.models.commit import CommitHistory
from git_porcelain.parsers.log import parse_log
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import output_error
from git_porcelain.services.shell import quote

logger = get_logger(__name__)

_NO_COMMITS_MARKER = "does not have any commits yet"


class HistoryService(GitCommandService):
    """Service for reading commit history."""

    def get_remote_url(self) -> Optional[str]:
        """URL of the default remote, or None when no remote is configured."""
        result = self._execute("ls-remote --get-url")
        self._ensure_repository(result.output)
        url = result.stdout.strip()
        # Without a remote, git echoes the remote name back
        if not result.ok or not url or ("/" not in url and ":" not in url):
            return None
        return url

    def get_commit_history(self, entries: Optional[int] = None, file_path=None) -> List[CommitHistory]:
        """Commits reachable from HEAD, newest first.

        Args:
            entries: Maximum number of commits to return (all if None)
            file_path: Only commits touching this file, following renames

        Returns:
            List of CommitHistory records, each carrying the remote URL
        """
        args = f"log --pretty={quote(LOG_PRETTY_FORMAT)}"
        if entries is not None:
            args += f" -n {int(entries)}"
        if file_path is not None:
            args += f" --follow -- {quote(file_path)}"

        result = self._execute(args)
        output = self._ensure_repository(result.output)
        if not result.ok:
            if _NO_COMMITS_MARKER in output:
                return []
            raise output_error(output, "get_commit_history")

        commits = parse_log(result.stdout, self.get_remote_url())
        logger.debug(f"Read {len(commits)} commits")
        return commits
