"""Tracks the set of changed files in a working tree."""

from enum import Enum
from threading import Lock
from typing import List, Optional

from git_porcelain.exceptions import GitPorcelainError
from git_porcelain.logging_config import get_logger
from git_porcelain.models.changes import FileChangeRecord
from git_porcelain.utils.feed import ChangeFeed

logger = get_logger(__name__)


class TrackerState(Enum):
    """Load state of a ChangeTracker."""
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ChangeTracker:
    """Holds the latest changed-file snapshot and reports what moved.

    Only one reload runs at a time; a reload requested while another is in
    flight returns an empty delta straight away.
    """

    def __init__(self, client, load: bool = True):
        """Initialize the tracker.

        Args:
            client: GitClient for the repository
            load: Read the first snapshot right away
        """
        self.client = client
        self.state = TrackerState.LOADING
        self.changed: List[FileChangeRecord] = []
        self.last_error: Optional[GitPorcelainError] = None
        self.changes: ChangeFeed[List[FileChangeRecord]] = ChangeFeed()
        self._reload_lock = Lock()

        try:
            self.is_git_repository = client.is_repository()
        except GitPorcelainError as e:
            logger.debug(f"Repository check failed: {e}")
            self.is_git_repository = False

        if load:
            self.reload()

    def reload(self) -> List[FileChangeRecord]:
        """Re-read the changed files.

        Returns:
            Records whose path appeared or disappeared since the last
            snapshot: dropped paths with their old record, new paths with
            their new record. When the reload fails every previous record
            is dropped. Empty if nothing moved or if another reload is
            already running.
        """
        if not self._reload_lock.acquire(blocking=False):
            logger.debug("Reload already in progress, skipping")
            return []

        try:
            try:
                new_changed = self.client.get_changed_files()
            except GitPorcelainError as e:
                logger.warning(f"Failed to read changed files: {e}")
                dropped = self.changed
                self.changed = []
                self.state = TrackerState.ERROR
                self.last_error = e
                if dropped:
                    self.changes.publish(dropped)
                return dropped

            old_urls = {record.url for record in self.changed}
            new_urls = {record.url for record in new_changed}
            moved = old_urls ^ new_urls

            delta = [record for record in self.changed if record.url in moved]
            delta += [record for record in new_changed if record.url in moved]

            self.changed = new_changed
            self.state = TrackerState.SUCCESS
            self.last_error = None

            if delta:
                logger.debug(f"{len(delta)} changed file(s) appeared or disappeared")
                self.changes.publish(delta)
            return delta
        finally:
            self._reload_lock.release()

    def discard_file_changes(self, record: FileChangeRecord) -> bool:
        """Throw away unstaged changes to one file and reload."""
        try:
            self.client.discard_file_changes(record.url)
        except GitPorcelainError as e:
            logger.error(f"Failed to discard changes to {record.name}: {e}")
            return False
        self.reload()
        return True

    def discard_project_changes(self) -> bool:
        """Throw away every unstaged change and reload."""
        try:
            self.client.discard_project_changes()
        except GitPorcelainError as e:
            logger.error(f"Failed to discard project changes: {e}")
            return False
        self.reload()
        return True
