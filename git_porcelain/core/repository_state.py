"""Cached view of a repository's branches, refreshed as one unit."""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TypeVar

from git_porcelain.exceptions import GitPorcelainError
from git_porcelain.logging_config import get_logger
from git_porcelain.models.branch import Branch, BranchType
from git_porcelain.utils.feed import ChangeFeed

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class RefreshResult:
    """Errors collected by one refresh, keyed by the step that failed."""
    errors: Dict[str, GitPorcelainError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def compute_recent_branches(
    names: List[str],
    branches: List[Branch],
    default_branch: Optional[Branch],
    limit: int,
) -> List[Branch]:
    """Resolve recently checked-out names to local branches.

    Skips the default branch, names with no matching local branch, and
    duplicates. Stops at `limit` entries.
    """
    local = {branch.name: branch for branch in branches if branch.type == BranchType.LOCAL}
    recent: List[Branch] = []

    for name in names:
        if default_branch is not None and name == default_branch.name:
            continue
        branch = local.get(name)
        if branch is not None and branch not in recent:
            recent.append(branch)
        if len(recent) >= limit:
            break

    return recent


class RepositoryState:
    """Branch snapshot of one repository.

    `refresh` reloads every field; a failing step is logged and leaves its
    field as it was, so callers always see the last good data. Subscribers
    of `changes` are called with this object after every refresh.
    """

    def __init__(self, client):
        """Initialize the state.

        Args:
            client: GitClient for the repository
        """
        self.client = client
        self.config = client.config

        self.current_branch: Optional[str] = None
        self.all_branches: List[Branch] = []
        self.default_branch: Optional[Branch] = None
        self.upstream_default_branch: Optional[Branch] = None
        self.recent_branches: List[Branch] = []
        self.pull_with_rebase: Optional[bool] = None

        self.changes: ChangeFeed["RepositoryState"] = ChangeFeed()

    def _step(self, result: RefreshResult, name: str, action: Callable[[], T]) -> Optional[T]:
        try:
            value = action()
        except GitPorcelainError as e:
            logger.warning(f"Refresh step '{name}' failed: {e}")
            result.errors[name] = e
            return None
        return value

    def refresh(self) -> RefreshResult:
        """Reload the whole snapshot. Never raises for git failures."""
        result = RefreshResult()

        self._step(result, "current_branch", self.refresh_current_branch)
        self._step(result, "branches", self.refresh_branches)

        # Default and recent branches are resolved against the branch list
        if "branches" not in result.errors:
            recent_names = self._step(
                result,
                "recent_branch_names",
                lambda: self.client.reflog.get_recent_branches(self.config.recent_branches_limit + 1),
            )
            self._step(result, "default_branch", self.refresh_default_branch)
            if "default_branch" in result.errors:
                self._drop_missing_defaults()
            if "recent_branch_names" not in result.errors:
                self.refresh_recent_branches(recent_names or [])

        self._step(result, "pull_with_rebase", self.refresh_pull_with_rebase)

        if result.ok:
            logger.debug("Repository state refreshed")
        self.changes.publish(self)
        return result

    def refresh_current_branch(self) -> None:
        self.current_branch = self.client.get_current_branch_name()

    def refresh_branches(self) -> None:
        self.all_branches = self.client.branches.get_branches()

    def _resolve_remote_name(self) -> Optional[str]:
        names = [remote.name for remote in self.client.remotes.get_remotes()]
        if self.config.default_remote in names:
            return self.config.default_remote
        return names[0] if names else None

    def refresh_default_branch(self) -> None:
        """Find the default branch and its remote counterpart.

        The remote's HEAD decides when it is known; otherwise
        ``init.defaultBranch`` and then the configured default name.
        """
        remote = self._resolve_remote_name()

        default_name = self.client.remotes.get_remote_head(remote) if remote else None
        if not default_name:
            default_name = (
                self.client.git_config.get_config_value("init.defaultBranch")
                or self.config.default_branch
            )
        logger.debug(f"Default branch name: {default_name} (remote: {remote})")

        self.default_branch = next(
            (b for b in self.all_branches if b.type == BranchType.LOCAL and b.name == default_name),
            None,
        )
        self.upstream_default_branch = next(
            (
                b for b in self.all_branches
                if b.type == BranchType.REMOTE
                and b.remote_name == remote
                and b.name_without_remote == default_name
            ),
            None,
        ) if remote else None

    def _drop_missing_defaults(self) -> None:
        """Re-point previous defaults at the new branch list, or forget them."""
        self.default_branch = next((b for b in self.all_branches if b == self.default_branch), None)
        self.upstream_default_branch = next(
            (b for b in self.all_branches if b == self.upstream_default_branch), None
        )

    def refresh_recent_branches(self, names: List[str]) -> None:
        self.recent_branches = compute_recent_branches(
            names,
            self.all_branches,
            self.default_branch,
            self.config.recent_branches_limit,
        )

    def refresh_pull_with_rebase(self) -> None:
        value = self.client.git_config.get_config_value("pull.rebase")
        if value is None or value == "":
            self.pull_with_rebase = None
        elif value.lower() in ("true", "merges", "interactive"):
            self.pull_with_rebase = True
        elif value.lower() == "false":
            self.pull_with_rebase = False
        else:
            logger.warning(f"Unrecognised pull.rebase value: {value!r}")
            self.pull_with_rebase = None
