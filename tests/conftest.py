"""Pytest fixtures for git-porcelain tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from git_porcelain.config import Config
from git_porcelain.services.shell import CommandResult, ShellClient


class FakeShell(ShellClient):
    """Command runner that answers from scripted responses instead of running git.

    Responses are matched by substring against the command line; the first
    registered match wins. Unmatched commands succeed with no output.
    """

    def __init__(self):
        super().__init__()
        self.responses = []
        self.commands = []
        self.live_fragments = []
        self.live_result = CommandResult(0, "", "")

    def add(self, fragment, stdout="", stderr="", status=0):
        self.responses.append((fragment, CommandResult(status, stdout, stderr)))
        return self

    def execute(self, command, directory):
        self.commands.append(command)
        for fragment, result in self.responses:
            if fragment in command:
                return result
        return CommandResult(0, "", "")

    def run_live(self, command, directory):
        self.commands.append(command)
        for fragment in self.live_fragments:
            yield fragment
        return self.live_result


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'default_branch': 'main',
        'default_remote': 'origin',
        'recent_branches_limit': 5,
        'reflog_scan_limit': 2500,
    }


@pytest.fixture
def config(mock_config):
    return Config.from_dict(mock_config)


@pytest.fixture
def fake_shell():
    """Scripted command runner."""
    return FakeShell()


@pytest.fixture
def mock_shell():
    """A Mock of the command runner for checking how it is called."""
    shell = Mock(spec=ShellClient)
    shell.execute.return_value = CommandResult(0, "", "")
    shell.run.return_value = ""
    return shell


def _commit_file(repo, name, content, message):
    path = Path(repo.working_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def commit_file():
    """Helper that writes, stages and commits a file."""
    return _commit_file


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")

    # Create initial commit on main branch
    repo.git.commit("--allow-empty", "-m", "Initial commit")
    (repo_path / "README.md").write_text("# Test Repository\n")
    repo.git.add("README.md")
    repo.git.commit("-m", "Add README")

    # Rename master to main if needed
    repo.git.branch("-M", "main")

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def empty_git_repo(temp_dir):
    """A repository with no commits yet."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
    yield repo
    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with feature branches and checkout history."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    for name in ("feature/one", "feature/two", "bugfix/three"):
        repo.git.checkout("-b", name)
        file_name = name.replace("/", "_") + ".txt"
        (repo_path / file_name).write_text(f"{name}\n")
        repo.git.add(file_name)
        repo.git.commit("-m", f"Work on {name}")
        repo.git.checkout("main")

    yield repo


@pytest.fixture
def cloned_repo(git_repo_with_branches, temp_dir):
    """A clone of git_repo_with_branches, so remote-tracking refs exist."""
    clone_path = temp_dir / "clone"
    clone = git.Repo.clone_from(git_repo_with_branches.working_dir, clone_path)
    with clone.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
    yield clone
    clone.close()
