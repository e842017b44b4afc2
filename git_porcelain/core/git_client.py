"""Facade over the git operation services for one repository."""

from typing import Iterator, List, Optional, Union

from git_porcelain.config import Config
from git_porcelain.exceptions import GitPorcelainError
from git_porcelain.logging_config import get_logger
from git_porcelain.models.changes import FileChangeRecord
from git_porcelain.models.commit import CommitHistory
from git_porcelain.models.results import CloneProgressEvent, MergeResult
from git_porcelain.parsers.status import parse_status
from git_porcelain.services.git import (
    BranchQueries,
    CheckoutService,
    CloneService,
    FilesystemStateProber,
    GitConfigService,
    HistoryService,
    MergeService,
    ReflogService,
    RemoteService,
    StagingService,
    StashService,
)
from git_porcelain.services.git.diagnostics import ensure_repository, raise_for_result
from git_porcelain.services.shell import ShellClient, quote

logger = get_logger(__name__)


class GitClient:
    """Entry point for git operations on a single working directory.

    Holds one instance of each operation service, all sharing the same
    command runner, plus shortcuts for the calls the state models make.
    """

    def __init__(
        self,
        repo_path: str,
        config: Optional[Union[Config, dict]] = None,
        shell: Optional[ShellClient] = None,
    ):
        """Initialize the client.

        Args:
            repo_path: Path to the repository working directory
            config: Config instance or dictionary (defaults if None)
            shell: Command runner shared by every service
        """
        self.repo_path = str(repo_path)

        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config or Config()

        self.shell = shell or ShellClient()
        self.prober = FilesystemStateProber(self.repo_path)

        self.branches = BranchQueries(self.repo_path, self.shell)
        self.checkout = CheckoutService(self.repo_path, self.shell)
        self.merges = MergeService(self.repo_path, self.shell, self.prober)
        self.stashes = StashService(self.repo_path, self.shell)
        self.staging = StagingService(self.repo_path, self.shell)
        self.remotes = RemoteService(self.repo_path, self.shell)
        self.reflog = ReflogService(self.repo_path, self.shell, self.config.reflog_scan_limit)
        self.git_config = GitConfigService(self.repo_path, self.shell)
        self.history = HistoryService(self.repo_path, self.shell)
        self.cloner = CloneService(self.shell)

        # Last branch name read from git, used to skip redundant checkouts
        self.current_branch_name: Optional[str] = None

    def is_repository(self) -> bool:
        """True if the working directory is inside a git work tree."""
        result = self.shell.execute("git rev-parse --is-inside-work-tree", self.repo_path)
        return result.ok and result.stdout.strip() == "true"

    def get_current_branch_name(self) -> str:
        name = self.branches.get_current_branch()
        self.current_branch_name = name
        return name

    def get_changed_files(self) -> List[FileChangeRecord]:
        """Working tree changes, untracked files included.

        Raises:
            NotARepositoryError: the directory is not a repository
            OutputError: git status failed
            URLDecodeError: a status line had no usable filename
        """
        result = self.shell.execute("git status --porcelain -u", self.repo_path)
        raise_for_result(result, "get_changed_files", self.repo_path)
        records = parse_status(result.stdout, self.repo_path)
        logger.debug(f"Found {len(records)} changed files")
        return records

    def checkout_branch(self, name: str) -> None:
        """Check out a branch, doing nothing if it is already current."""
        if name == self.current_branch_name:
            logger.debug(f"Already on {name}, skipping checkout")
            return

        self.checkout.checkout_branch(name)
        try:
            self.get_current_branch_name()
        except GitPorcelainError as e:
            logger.debug(f"Could not re-read current branch after checkout: {e}")
            self.current_branch_name = name

    def pull(self) -> str:
        result = self.shell.execute("git pull", self.repo_path)
        return raise_for_result(result, "pull", self.repo_path).output

    def fetch(self, remote: Optional[str] = None) -> str:
        command = "git fetch --prune"
        if remote:
            command += f" {quote(remote)}"
        result = self.shell.execute(command, self.repo_path)
        return raise_for_result(result, "fetch", self.repo_path).output

    def merge(self, branch: str, squash: bool = False) -> MergeResult:
        return self.merges.merge(branch, squash)

    def get_commit_history(self, entries: Optional[int] = None, file_path=None) -> List[CommitHistory]:
        return self.history.get_commit_history(entries, file_path)

    def stage(self, files) -> None:
        self.staging.stage(files)

    def unstage(self, files) -> None:
        self.staging.unstage(files)

    def commit(self, message: str) -> None:
        self.staging.commit(message)

    def discard_file_changes(self, path) -> None:
        self.staging.discard_file_changes(path)

    def discard_project_changes(self) -> None:
        self.staging.discard_project_changes()

    def stash_changes(self, message: Optional[str] = None) -> bool:
        return self.stashes.stash(message)

    def clone_repository(
        self,
        url: str,
        branch: Optional[str] = None,
        all_branches: bool = True,
    ) -> Iterator[CloneProgressEvent]:
        """Clone `url` into this client's directory, yielding progress events."""
        return self.cloner.clone(url, self.repo_path, branch, all_branches)

    def ensure_repository(self) -> None:
        """Raise NotARepositoryError unless the directory is a repository."""
        result = self.shell.execute("git rev-parse --git-dir", self.repo_path)
        ensure_repository(result.output, self.repo_path)
