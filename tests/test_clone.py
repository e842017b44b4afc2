"""Tests for cloning with progress"""
from pathlib import Path

import pytest

from git_porcelain.core import GitClient
from git_porcelain.exceptions import NotARepositoryError, OutputError
from git_porcelain.models import CloneProgressKind
from git_porcelain.services.git import CloneService
from git_porcelain.services.shell import CommandResult


class TestCloneServiceScripted:
    """Test clone event translation with a scripted runner."""

    def test_events_in_order(self, fake_shell, temp_dir):
        fake_shell.live_fragments = [
            "Cloning into 'x'...",
            "Receiving objects:  42% (420/1000)",
            "Receiving objects: 100% (1000/1000), done.",
        ]
        events = list(CloneService(fake_shell).clone("https://example.com/x.git", temp_dir / "x", "main", all_branches=False))

        assert [(e.kind, e.percent) for e in events] == [
            (CloneProgressKind.CLONING_INTO, 0),
            (CloneProgressKind.RECEIVING, 42),
            (CloneProgressKind.RECEIVING, 100),
        ]
        assert "--branch main --single-branch" in fake_shell.commands[0]

    def test_nothing_runs_until_iterated(self, fake_shell, temp_dir):
        CloneService(fake_shell).clone("https://example.com/x.git", temp_dir / "x")
        assert fake_shell.commands == []

    def test_failure_raises_after_stream(self, fake_shell, temp_dir):
        fake_shell.live_fragments = [
            "Cloning into 'x'...",
            "fatal: repository 'https://example.com/x.git/' not found",
        ]
        fake_shell.live_result = CommandResult(128, "", "")

        events = CloneService(fake_shell).clone("https://example.com/x.git", temp_dir / "x")
        assert next(events).kind == CloneProgressKind.CLONING_INTO
        with pytest.raises(OutputError) as exc_info:
            list(events)
        assert "not found" in exc_info.value.output

    def test_not_a_repository_fragment(self, fake_shell, temp_dir):
        fake_shell.live_fragments = ["fatal: not a git repository: '/nope'"]
        with pytest.raises(NotARepositoryError):
            list(CloneService(fake_shell).clone("/nope", temp_dir / "x"))

    def test_all_branches_checks_out_branch(self, fake_shell, temp_dir):
        fake_shell.add("git checkout", stderr="Switched to a new branch 'dev'")
        list(CloneService(fake_shell).clone("https://example.com/x.git", temp_dir / "x", "dev"))

        assert "--single-branch" not in fake_shell.commands[0]
        assert fake_shell.commands[-1] == "git checkout dev"


class TestCloneServiceReal:
    """Test cloning a local repository with real git."""

    def test_clone_all_branches(self, git_repo_with_branches, temp_dir):
        target = temp_dir / "cloned"
        client = GitClient(str(target))

        events = list(client.clone_repository(git_repo_with_branches.working_dir, "feature/one"))

        assert events
        assert (target / ".git").is_dir()
        assert client.get_current_branch_name() == "feature/one"

    def test_clone_single_branch(self, git_repo_with_branches, temp_dir):
        target = temp_dir / "single"
        list(CloneService().clone(git_repo_with_branches.working_dir, target, "feature/two", all_branches=False))

        client = GitClient(str(target))
        assert client.get_current_branch_name() == "feature/two"
        remote_names = [b.name for b in client.branches.get_branches() if not b.is_local]
        assert remote_names == ["origin/feature/two"]

    def test_clone_missing_source(self, temp_dir):
        with pytest.raises(OutputError):
            list(CloneService().clone(str(temp_dir / "does-not-exist"), temp_dir / "target"))

    def test_close_stops_clone(self, git_repo_with_branches, temp_dir):
        events = CloneService().clone(git_repo_with_branches.working_dir, Path(temp_dir) / "closed")
        next(events)
        events.close()

    def test_clone_into_relative_path(self, git_repo, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        events = list(CloneService().clone(git_repo.working_dir, "out/copy"))

        assert events
        assert (temp_dir / "out" / "copy" / "README.md").exists()
        assert not (temp_dir / "out" / "out").exists()
