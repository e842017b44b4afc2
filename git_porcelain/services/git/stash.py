"""Stashing working tree changes."""

from typing import List, Optional

from git_porcelain.constants import NO_LOCAL_CHANGES_MESSAGE, STASH_PRETTY_FORMAT
from git_porcelain.logging_config import get_logger
from git_porcelain.models.stash import StashEntry
from git_porcelain.parsers.stash import parse_stash_list
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.shell import quote

logger = get_logger(__name__)


class StashService(GitCommandService):
    """Service for stash operations."""

    def stash(self, message: Optional[str] = None) -> bool:
        """Stash local changes.

        Returns:
            False when there was nothing to stash
        """
        args = f"stash push -m {quote(message)}" if message else "stash"
        result = self._run_checked(args, "stash")

        if NO_LOCAL_CHANGES_MESSAGE in result.output:
            logger.debug("No local changes to stash")
            return False

        logger.info("Stashed local changes")
        return True

    def pop(self, name: Optional[str] = None) -> None:
        args = f"stash pop {quote(name)}" if name else "stash pop"
        self._run_checked(args, "stash_pop")
        logger.info(f"Popped {name or 'latest stash'}")

    def drop(self, name: str) -> None:
        self._run_checked(f"stash drop {quote(name)}", "stash_drop")
        logger.info(f"Dropped {name}")

    def list_stashes(self) -> List[StashEntry]:
        result = self._run_checked(f"stash list --format={quote(STASH_PRETTY_FORMAT)}", "stash_list")
        return parse_stash_list(result.stdout)
