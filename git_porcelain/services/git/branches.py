"""Branch queries and branch management."""

from typing import List, Optional

from git_porcelain.constants import BRANCH_REF_FORMAT, LOCAL_REF_PREFIX, REMOTE_REF_PREFIX
from git_porcelain.logging_config import get_logger
from git_porcelain.models.branch import Branch
from git_porcelain.parsers.refs import parse_branch_refs
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import (
    GitErrorKind,
    classify_output,
    output_error,
    raise_for_result,
)
from git_porcelain.services.shell import quote

logger = get_logger(__name__)


class BranchQueries(GitCommandService):
    """Service for querying and managing branches."""

    def get_current_branch(self) -> str:
        """Get the name of the checked-out branch ("HEAD" when detached)."""
        result = self._execute("rev-parse --abbrev-ref HEAD")
        self._ensure_repository(result.output)

        if not result.ok:
            # Unborn branch: HEAD cannot be resolved yet but still names a branch
            result = self._run_checked("symbolic-ref --short HEAD", "get_current_branch")

        return result.stdout.strip()

    def get_branches(self) -> List[Branch]:
        """Get all local and remote-tracking branches."""
        fmt = quote(BRANCH_REF_FORMAT)
        local = self._run_checked(f"for-each-ref --format={fmt} {LOCAL_REF_PREFIX.rstrip('/')}", "get_branches")
        remote = self._run_checked(f"for-each-ref --format={fmt} {REMOTE_REF_PREFIX.rstrip('/')}", "get_branches")

        branches = parse_branch_refs(local.stdout, remote.stdout)
        logger.debug(f"Found {len(branches)} branches")
        return branches

    def get_branch_names(self, all_branches: bool = False) -> List[str]:
        """Get short branch names, optionally including remote-tracking ones."""
        args = "branch --format=%(refname:short)"
        if all_branches:
            args += " -a"
        result = self._run_checked(args, "get_branch_names")
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def create_branch(self, name: str, start_point: Optional[str] = None, no_track: bool = False) -> None:
        args = f"branch {quote(name)}"
        if start_point:
            args += f" {quote(start_point)}"
        if no_track:
            args += " --no-track"
        self._run_checked(args, "create_branch")
        logger.info(f"Created branch {name}")

    def rename_branch(self, branch: str, new_name: str) -> None:
        self._run_checked(f"branch -m {quote(branch)} {quote(new_name)}", "rename_branch")
        logger.info(f"Renamed branch {branch} to {new_name}")

    def delete_local_branch(self, name: str) -> bool:
        self._run_checked(f"branch -D {quote(name)}", "delete_local_branch")
        logger.info(f"Deleted local branch {name}")
        return True

    def delete_remote_branch(self, remote_name: str, branch_name: str) -> None:
        """Delete a branch on the remote.

        If the remote says the ref is already gone, the stale remote-tracking
        ref is removed locally instead, which is what a successful push would
        have done.
        """
        result = self._execute(f"push {quote(remote_name)} {quote(':' + branch_name)}")
        self._ensure_repository(result.output)

        if classify_output(result.output) == GitErrorKind.BRANCH_DELETION_FAILED:
            ref = f"{REMOTE_REF_PREFIX}{remote_name}/{branch_name}"
            logger.debug(f"Remote branch already gone, deleting {ref}")
            self._run_checked(f"update-ref -d {quote(ref)}", "delete_remote_branch")
            return

        raise_for_result(result, "delete_remote_branch", self.repo_path)
        if not result.ok:
            raise output_error(result.output, "delete_remote_branch")
        logger.info(f"Deleted remote branch {remote_name}/{branch_name}")

    def get_branches_pointed_at(self, commitish: str) -> List[str]:
        """Names of local branches whose tip is `commitish`."""
        result = self._run_checked(
            f"branch --points-at={quote(commitish)} --format=%(refname:short)",
            "get_branches_pointed_at",
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]
