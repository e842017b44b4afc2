"""Tests for the repository state model"""
import pytest

from git_porcelain.core import GitClient, RepositoryState, compute_recent_branches
from git_porcelain.exceptions import NotARepositoryError
from git_porcelain.models import Branch, BranchType
from git_porcelain.services.shell import CommandResult

REPO = "/work/repo"
SHA = "a" * 40


def _local(name):
    return Branch(name=name, type=BranchType.LOCAL, ref=f"refs/heads/{name}")


class TestComputeRecentBranches:
    """Test recent branch selection."""

    def test_excludes_default_and_duplicates(self):
        names = ["A", "B", "default", "C", "A", "D", "E", "F"]
        branches = [_local(n) for n in ["A", "B", "C", "D", "E", "F", "default"]]
        recent = compute_recent_branches(names, branches, _local("default"), 5)

        assert [b.name for b in recent] == ["A", "B", "C", "D", "E"]
        assert len(recent) <= 5
        assert len(set(recent)) == len(recent)

    def test_only_local_branches(self):
        remote = Branch(name="origin/A", type=BranchType.REMOTE, ref="refs/remotes/origin/A", remote_name="origin")
        recent = compute_recent_branches(["origin/A", "gone", "B"], [remote, _local("B")], None, 5)
        assert [b.name for b in recent] == ["B"]

    def test_empty(self):
        assert compute_recent_branches([], [_local("A")], None, 5) == []


def _script_repository(shell, remote_head="refs/remotes/origin/main", pull_rebase="false"):
    # Registered first: the symbolic-ref command line also contains "refs/remotes"
    if remote_head:
        shell.add("symbolic-ref", stdout=remote_head)
    else:
        shell.add("symbolic-ref", status=1)
    shell.add("rev-parse --abbrev-ref HEAD", stdout="feature")
    shell.add("refs/heads", stdout="\n".join([
        "refs/heads/main\x1fmain\x1forigin/main\x1faaa\x1f",
        "refs/heads/feature\x1ffeature\x1f\x1fbbb\x1f",
        "refs/heads/old\x1fold\x1f\x1fccc\x1f",
    ]))
    shell.add("refs/remotes", stdout="refs/remotes/origin/main\x1forigin/main\x1f\x1faaa\x1f")
    shell.add("log -g", stdout="\n".join([
        f"{SHA} HEAD@{{0}}: checkout: moving from main to feature",
        f"{SHA} HEAD@{{1}}: checkout: moving from old to main",
        f"{SHA} HEAD@{{2}}: checkout: moving from main to old",
    ]))
    shell.add("remote -v", stdout="origin\thttps://x/y.git (fetch)\norigin\thttps://x/y.git (push)")
    if pull_rebase is None:
        shell.add("pull.rebase", status=1)
    else:
        shell.add("pull.rebase", stdout=pull_rebase + "\0")


class TestRepositoryStateRefresh:
    """Test refresh with scripted git output."""

    def test_full_refresh(self, fake_shell, config):
        _script_repository(fake_shell)
        state = RepositoryState(GitClient(REPO, config, fake_shell))

        result = state.refresh()

        assert result.ok
        assert state.current_branch == "feature"
        assert [b.name for b in state.all_branches] == ["main", "feature", "old", "origin/main"]
        assert state.default_branch.name == "main"
        assert state.default_branch in state.all_branches
        assert state.upstream_default_branch.name == "origin/main"
        assert [b.name for b in state.recent_branches] == ["feature", "old"]
        assert state.pull_with_rebase is False

    def test_default_from_config_when_remote_head_unknown(self, fake_shell, config):
        _script_repository(fake_shell, remote_head=None)
        fake_shell.add("init.defaultBranch", status=1)
        state = RepositoryState(GitClient(REPO, config, fake_shell))

        state.refresh()

        assert state.default_branch.name == "main"

    def test_default_absent_when_no_such_branch(self, fake_shell):
        _script_repository(fake_shell, remote_head="refs/remotes/origin/trunk")
        state = RepositoryState(GitClient(REPO, None, fake_shell))

        state.refresh()

        assert state.default_branch is None
        assert state.upstream_default_branch is None

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("false", False),
        ("", None),
        (None, None),
        ("sometimes", None),
    ])
    def test_pull_with_rebase(self, fake_shell, config, value, expected):
        _script_repository(fake_shell, pull_rebase=value)
        state = RepositoryState(GitClient(REPO, config, fake_shell))

        state.refresh()

        assert state.pull_with_rebase is expected

    def test_failing_step_keeps_previous_value(self, fake_shell, config):
        _script_repository(fake_shell)
        state = RepositoryState(GitClient(REPO, config, fake_shell))
        state.refresh()
        previous = list(state.all_branches)

        # Branch listing now fails
        fake_shell.responses.insert(0, ("refs/heads", CommandResult(128, "", "fatal: bad object")))
        result = state.refresh()

        assert not result.ok
        assert "branches" in result.errors
        assert state.all_branches == previous
        assert state.current_branch == "feature"

    def test_failed_default_step_drops_deleted_default(self, fake_shell, config):
        _script_repository(fake_shell)
        state = RepositoryState(GitClient(REPO, config, fake_shell))
        state.refresh()
        assert state.default_branch.name == "main"

        # main is gone and the remote lookup now fails
        fake_shell.responses[:0] = [
            ("remote -v", CommandResult(128, "", "fatal: unable to read config")),
            ("refs/heads", CommandResult(0, "refs/heads/feature\x1ffeature\x1f\x1fbbb\x1f", "")),
            ("refs/remotes", CommandResult(0, "", "")),
        ]
        result = state.refresh()

        assert "default_branch" in result.errors
        assert [b.name for b in state.all_branches] == ["feature"]
        assert state.default_branch is None
        assert state.upstream_default_branch is None

    def test_failed_default_step_keeps_listed_default(self, fake_shell, config):
        _script_repository(fake_shell)
        state = RepositoryState(GitClient(REPO, config, fake_shell))
        state.refresh()

        fake_shell.responses.insert(0, ("remote -v", CommandResult(128, "", "fatal: unable to read config")))
        result = state.refresh()

        assert "default_branch" in result.errors
        assert state.default_branch.name == "main"
        assert state.default_branch in state.all_branches
        assert state.upstream_default_branch.name == "origin/main"

    def test_refresh_never_raises_outside_repository(self, fake_shell, config):
        fake_shell.add("git", stderr="fatal: not a git repository (or any of the parent directories): .git", status=128)
        state = RepositoryState(GitClient(REPO, config, fake_shell))

        result = state.refresh()

        assert not result.ok
        assert isinstance(result.errors["current_branch"], NotARepositoryError)
        assert state.all_branches == []
        assert state.default_branch is None

    def test_subscribers_notified(self, fake_shell, config):
        _script_repository(fake_shell)
        state = RepositoryState(GitClient(REPO, config, fake_shell))
        seen = []
        state.changes.subscribe(seen.append)

        state.refresh()

        assert seen == [state]
