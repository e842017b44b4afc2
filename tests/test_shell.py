"""Tests for the command runner"""
import io

import pytest

from git_porcelain.exceptions import GitNotFoundError
from git_porcelain.services.shell import (
    CommandResult,
    ShellClient,
    _iter_fragments,
    escape_whitespace,
    format_command,
    quote,
)


class TestCommandFormatting:
    def test_escape_whitespace(self):
        assert escape_whitespace("/tmp/my repo") == "/tmp/my\\ repo"

    def test_format_command(self):
        assert format_command("git status", "/tmp/my repo") == "cd /tmp/my\\ repo; git status"
        assert format_command(["git", "log", "-n", "1"], "/r") == "cd /r; git log -n 1"

    def test_quote(self):
        assert quote("it's") == "'it'\"'\"'s'"
        assert quote("plain") == "plain"


class TestCommandResult:
    def test_output_joins_streams(self):
        result = CommandResult(0, "out", "err")
        assert result.output == "out\nerr"
        assert CommandResult(0, "", "err").output == "err"
        assert result.ok
        assert not CommandResult(1, "", "").ok


class TestIterFragments:
    """Test splitting of streamed output."""

    def test_splits_on_carriage_return_and_newline(self):
        stream = io.BytesIO(b"Cloning into 'x'...\nReceiving objects:  42% (420/1000)\rReceiving objects: 100%\n")
        assert list(_iter_fragments(stream, chunk_size=7)) == [
            "Cloning into 'x'...",
            "Receiving objects:  42% (420/1000)",
            "Receiving objects: 100%",
        ]

    def test_tail_without_line_break(self):
        assert list(_iter_fragments(io.BytesIO(b"done"))) == ["done"]


class TestShellClient:
    """Test running real git commands."""

    def test_execute_in_repository(self, git_repo):
        result = ShellClient().execute("git rev-parse --is-inside-work-tree", git_repo.working_dir)
        assert result.ok
        assert result.stdout == "true"

    def test_non_zero_exit_is_returned(self, temp_dir):
        result = ShellClient().execute("git rev-parse --abbrev-ref HEAD", temp_dir)
        assert not result.ok
        assert "not a git repository" in result.output

    def test_run_returns_combined_output(self, temp_dir):
        output = ShellClient().run("git status", temp_dir)
        assert "fatal: not a git repository" in output

    def test_missing_directory(self, temp_dir):
        with pytest.raises(GitNotFoundError):
            ShellClient().execute("git status", temp_dir / "missing")

    def test_missing_executable(self, temp_dir):
        shell = ShellClient(git_executable=str(temp_dir / "no-such-git"))
        with pytest.raises(GitNotFoundError):
            shell.execute("git status", temp_dir)

    def test_empty_command(self, temp_dir):
        with pytest.raises(ValueError):
            ShellClient().execute("", temp_dir)

    def test_run_live_returns_result(self, git_repo):
        stream = ShellClient().run_live("git rev-parse --is-inside-work-tree", git_repo.working_dir)
        fragments = []
        while True:
            try:
                fragments.append(next(stream))
            except StopIteration as stop:
                result = stop.value
                break

        assert fragments == ["true"]
        assert result.ok
        assert result.stdout == "true"

    def test_run_live_large_stdout(self, git_repo, commit_file):
        """Test that output larger than a pipe buffer does not stall the stream."""
        lines = [f"line {i:06d}" for i in range(20000)]
        commit_file(git_repo, "big.txt", "\n".join(lines) + "\n", "Add big file")

        stream = ShellClient().run_live("git cat-file -p HEAD:big.txt", git_repo.working_dir)
        fragments = []
        while True:
            try:
                fragments.append(next(stream))
            except StopIteration as stop:
                result = stop.value
                break

        assert result.ok
        assert fragments == lines
        assert result.stdout.splitlines() == lines
