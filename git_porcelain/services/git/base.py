"""Shared plumbing for the git operation services."""

from typing import Optional

from git_porcelain.services.git.diagnostics import ensure_repository, is_fatal, output_error, raise_for_result
from git_porcelain.services.shell import CommandResult, ShellClient


class GitCommandService:
    """Base class for services that run git in one working directory.

    Services keep no repository state of their own; every call goes to git.
    """

    def __init__(self, repo_path: str, shell: Optional[ShellClient] = None):
        """Initialize the service.

        Args:
            repo_path: Path to the repository working directory
            shell: Command runner to use (a new ShellClient if omitted)
        """
        self.repo_path = str(repo_path)
        self.shell = shell or ShellClient()

    def _git(self, args: str) -> str:
        """Run ``git <args>`` and return the combined output."""
        return self.shell.run(f"git {args}", self.repo_path)

    def _execute(self, args: str) -> CommandResult:
        """Run ``git <args>`` and return the structured result."""
        return self.shell.execute(f"git {args}", self.repo_path)

    def _run_checked(self, args: str, operation: str) -> CommandResult:
        """Run ``git <args>`` and raise if it failed.

        Raises:
            NotARepositoryError: the directory is not a repository
            OutputError: stderr carries a fatal marker or git exited non-zero
        """
        result = self._execute(args)
        raise_for_result(result, operation, self.repo_path)
        if not result.ok:
            raise output_error(result.output, operation)
        return result

    def _ensure_repository(self, output: str) -> str:
        return ensure_repository(output, self.repo_path)

    @staticmethod
    def _is_fatal(result: CommandResult) -> bool:
        return is_fatal(result.stderr)
