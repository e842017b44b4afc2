"""Branch history read from the HEAD reflog."""

from datetime import datetime
from typing import Dict, List, Optional

from git_porcelain.constants import REFLOG_DATE_FORMAT, REFLOG_SCAN_LIMIT
from git_porcelain.logging_config import get_logger
from git_porcelain.parsers.reflog import parse_branch_checkouts, parse_recent_branches
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import output_error
from git_porcelain.services.shell import ShellClient, quote

logger = get_logger(__name__)

_NO_COMMITS_MARKER = "does not have any commits yet"


class ReflogService(GitCommandService):
    """Service for reflog queries."""

    def __init__(self, repo_path: str, shell: Optional[ShellClient] = None, scan_limit: int = REFLOG_SCAN_LIMIT):
        super().__init__(repo_path, shell)
        self.scan_limit = scan_limit

    def _reflog(self, args: str, operation: str) -> str:
        result = self._execute(args)
        output = self._ensure_repository(result.output)
        if not result.ok:
            if _NO_COMMITS_MARKER in output:
                logger.debug("No commits yet, reflog is empty")
                return ""
            raise output_error(output, operation)
        return result.stdout

    def get_recent_branches(self, limit: int) -> List[str]:
        """Names of the most recently checked-out branches, newest first.

        Only the last `scan_limit` reflog entries are looked at.
        """
        output = self._reflog(
            f"log -g --no-abbrev-commit --pretty=oneline HEAD -n {self.scan_limit} --",
            "get_recent_branches",
        )
        return parse_recent_branches(output, limit)

    def get_branch_checkouts(self, after: datetime) -> Dict[str, datetime]:
        """Latest checkout time of each branch checked out since `after`."""
        output = self._reflog(
            "reflog --date=iso "
            f"--after={quote(after.strftime(REFLOG_DATE_FORMAT).strip())} "
            f"--pretty={quote('%H %gd %gs')} "
            f"--grep-reflog={quote('checkout: moving from .* to .*$')} --",
            "get_branch_checkouts",
        )
        return parse_branch_checkouts(output)
