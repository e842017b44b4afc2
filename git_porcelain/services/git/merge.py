"""Merging branches."""

from typing import Optional

from git_porcelain.constants import NOOP_MERGE_MESSAGE
from git_porcelain.logging_config import get_logger
from git_porcelain.models.results import MergeResult
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import GitErrorKind, classify_output, output_error
from git_porcelain.services.git.probe import FilesystemStateProber, RepositoryStateProber
from git_porcelain.services.shell import ShellClient, quote

logger = get_logger(__name__)


class MergeService(GitCommandService):
    """Service for merge operations."""

    def __init__(
        self,
        repo_path: str,
        shell: Optional[ShellClient] = None,
        prober: Optional[RepositoryStateProber] = None,
    ):
        super().__init__(repo_path, shell)
        self.prober = prober or FilesystemStateProber(repo_path)

    def merge(self, branch: str, squash: bool = False) -> MergeResult:
        """Merge `branch` into the current branch.

        With `squash`, the squashed changes are committed straight away with
        git's prepared message.

        Returns:
            ALREADY_UP_TO_DATE when git had nothing to merge, FAILED when the
            merge stopped on conflicts, SUCCESS otherwise

        Raises:
            NotARepositoryError: the directory is not a repository
            OutputError: git refused the merge (bad ref, unrelated histories...)
        """
        args = "merge --squash" if squash else "merge"
        result = self._execute(f"{args} {quote(branch)}")
        output = self._ensure_repository(result.output)

        if result.stdout.strip() == NOOP_MERGE_MESSAGE:
            logger.debug(f"Nothing to merge from {branch}")
            return MergeResult.ALREADY_UP_TO_DATE

        kind = classify_output(output)
        if kind == GitErrorKind.MERGE_CONFLICTS:
            logger.warning(f"Merge of {branch} stopped on conflicts")
            return MergeResult.FAILED

        if not result.ok or self._is_fatal(result):
            raise output_error(output, "merge")

        if squash:
            commit = self._execute("commit --no-edit")
            self._ensure_repository(commit.output)
            if not commit.ok:
                logger.warning(f"Squash commit of {branch} failed: {commit.output}")
                return MergeResult.FAILED

        logger.info(f"Merged {branch}")
        return MergeResult.SUCCESS

    def abort_merge(self) -> None:
        self._run_checked("merge --abort", "abort_merge")
        logger.info("Aborted merge")

    def get_merge_base(self, first: str, second: str) -> Optional[str]:
        """Best common ancestor of two commits, or None if they share no history."""
        result = self._execute(f"merge-base {quote(first)} {quote(second)}")
        self._ensure_repository(result.output)

        # Exit 1 with no output means there is no common ancestor
        if result.status == 1 and not result.output.strip():
            return None
        if not result.ok:
            raise output_error(result.output, "get_merge_base")

        return result.stdout.strip() or None

    def is_merge_head_set(self) -> bool:
        return self.prober.is_merge_head_set()

    def is_squash_msg_set(self) -> bool:
        return self.prober.is_squash_msg_set()

    def is_merge_in_progress(self) -> bool:
        return self.prober.is_merge_in_progress()
