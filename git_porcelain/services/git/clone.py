"""Cloning repositories with progress reporting."""

from pathlib import Path
from typing import Iterator, List, Optional

from git_porcelain.logging_config import get_logger
from git_porcelain.models.results import CloneProgressEvent
from git_porcelain.parsers.progress import parse_clone_progress
from git_porcelain.services.git.checkout import CheckoutService
from git_porcelain.services.git.diagnostics import ensure_repository, output_error
from git_porcelain.services.shell import ShellClient, quote

logger = get_logger(__name__)


class CloneService:
    """Service for cloning repositories."""

    def __init__(self, shell: Optional[ShellClient] = None):
        self.shell = shell or ShellClient()

    def _clone_command(self, url: str, target: Path, branch: Optional[str], all_branches: bool) -> str:
        command = "git clone --progress"
        if branch and not all_branches:
            command += f" --branch {quote(branch)} --single-branch"
        return f"{command} {quote(url)} {quote(target)}"

    def clone(
        self,
        url: str,
        target_directory,
        branch: Optional[str] = None,
        all_branches: bool = True,
    ) -> Iterator[CloneProgressEvent]:
        """Clone `url` into `target_directory`, yielding progress events.

        Nothing runs until the first event is requested. Closing the
        iterator early stops the clone.

        Args:
            url: Repository URL or path
            target_directory: Directory to create the working copy in
            branch: Branch to check out (the remote's default if None)
            all_branches: Fetch every branch; otherwise only `branch`

        Raises:
            NotARepositoryError: git reported that a path is not a repository
            OutputError: git exited with a failure
        """
        # git runs in the parent directory, so a relative target must be absolute first
        target = Path(target_directory).resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        command = self._clone_command(url, target, branch, all_branches)
        logger.info(f"Cloning {url} into {target}")

        stream = self.shell.run_live(command, target.parent)
        captured: List[str] = []
        result = None
        try:
            while True:
                try:
                    fragment = next(stream)
                except StopIteration as stop:
                    result = stop.value
                    break

                captured.append(fragment)
                ensure_repository(fragment, target)
                yield parse_clone_progress(fragment)
        finally:
            stream.close()

        if result is not None and not result.ok:
            raise output_error("\n".join(captured), "clone")

        if branch and all_branches:
            CheckoutService(str(target), self.shell).checkout_branch(branch)

        logger.info(f"Cloned {url}")
