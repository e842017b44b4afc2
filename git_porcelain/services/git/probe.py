"""Probes for repository state that git has no query command for."""

from pathlib import Path

from git_porcelain.constants import GIT_DIR_NAME, MERGE_HEAD_FILE, SQUASH_MSG_FILE
from git_porcelain.logging_config import get_logger

logger = get_logger(__name__)


class RepositoryStateProber:
    """Answers whether a merge is in progress.

    Subclass and override `is_marker_set` to probe something other than the
    working copy's metadata directory (tests use an in-memory set).
    """

    def is_marker_set(self, name: str) -> bool:
        raise NotImplementedError

    def is_merge_head_set(self) -> bool:
        """True while a non-squash merge is waiting to be committed."""
        return self.is_marker_set(MERGE_HEAD_FILE)

    def is_squash_msg_set(self) -> bool:
        """True while a squash merge is waiting to be committed."""
        return self.is_marker_set(SQUASH_MSG_FILE)

    def is_merge_in_progress(self) -> bool:
        return self.is_merge_head_set() or self.is_squash_msg_set()


class FilesystemStateProber(RepositoryStateProber):
    """Checks for marker files inside ``<repo>/.git``."""

    def __init__(self, repo_path):
        self.repo_path = Path(repo_path)

    @property
    def git_dir(self) -> Path:
        return self.repo_path / GIT_DIR_NAME

    def is_marker_set(self, name: str) -> bool:
        exists = (self.git_dir / name).exists()
        logger.debug(f"{name} {'present' if exists else 'absent'} in {self.git_dir}")
        return exists
