"""Tests for git diagnostic classification"""
import pytest

from git_porcelain.exceptions import NotARepositoryError, OutputError
from git_porcelain.services.git.diagnostics import (
    GitErrorKind,
    classify_output,
    ensure_repository,
    output_error,
    raise_for_output,
    raise_for_result,
)
from git_porcelain.services.shell import CommandResult

NOT_A_REPO = "fatal: not a git repository (or any of the parent directories): .git"


class TestClassifyOutput:
    @pytest.mark.parametrize("output,kind", [
        ("CONFLICT (content): Merge conflict in a.txt", GitErrorKind.MERGE_CONFLICTS),
        ("fatal: A branch named 'dev' already exists.", GitErrorKind.BRANCH_ALREADY_EXISTS),
        ("error: remote origin already exists.", GitErrorKind.REMOTE_ALREADY_EXISTS),
        ("error: No such remote: 'upstream'", GitErrorKind.NO_SUCH_REMOTE),
        ("fatal: There is no merge to abort (MERGE_HEAD missing).", GitErrorKind.NO_MERGE_TO_ABORT),
        ("fatal: repository 'https://example.com/x.git/' not found", GitErrorKind.REPOSITORY_NOT_FOUND),
        (
            "error: Your local changes to the following files would be overwritten by checkout:",
            GitErrorKind.LOCAL_CHANGES_OVERWRITTEN,
        ),
        (
            "error: unable to delete 'gone': remote ref does not exist",
            GitErrorKind.BRANCH_DELETION_FAILED,
        ),
        ("nothing to commit, working tree clean", GitErrorKind.NOTHING_TO_COMMIT),
    ])
    def test_known_diagnostics(self, output, kind):
        assert classify_output(output) == kind

    def test_unknown_output(self):
        assert classify_output("Switched to branch 'main'") is None


class TestMarkerChecks:
    """Test the not-a-repository and fatal marker checks."""

    def test_not_a_repository_wins(self):
        """Test that the marker raises regardless of surrounding text."""
        output = f"Switched to branch 'main'\n{NOT_A_REPO}\nAlready up to date."
        with pytest.raises(NotARepositoryError):
            ensure_repository(output)
        with pytest.raises(NotARepositoryError):
            raise_for_output(output, "merge")

    def test_ensure_repository_returns_output(self):
        assert ensure_repository("ok") == "ok"

    def test_fatal_raises_output_error_with_kind(self):
        with pytest.raises(OutputError) as exc_info:
            raise_for_output("fatal: refusing to merge unrelated histories", "merge")

        assert exc_info.value.kind == GitErrorKind.UNRELATED_HISTORIES
        assert exc_info.value.operation == "merge"
        assert "unrelated histories" in exc_info.value.output

    def test_clean_output_passes(self):
        assert raise_for_output("Everything up-to-date") == "Everything up-to-date"

    @pytest.mark.parametrize("output", [
        "?? fatal_error.py",
        "refs/heads/fix-fatal-crash",
        "[main dde24ab] Fix fatal crash on startup",
        "origin\thttps://example.com/fatal.git (fetch)",
    ])
    def test_word_fatal_in_names_passes(self, output):
        """Test that only a line starting with the marker counts as fatal."""
        assert raise_for_output(output) == output

    def test_result_fatal_in_stdout_passes(self):
        result = CommandResult(0, "fatal: just a commit subject", "")
        assert raise_for_result(result, "log") is result

    def test_result_fatal_in_stderr_raises(self):
        result = CommandResult(128, "", "fatal: bad revision 'nope'")
        with pytest.raises(OutputError) as exc_info:
            raise_for_result(result, "log")
        assert exc_info.value.kind == GitErrorKind.BAD_REVISION

    def test_result_not_a_repository_in_stdout(self):
        with pytest.raises(NotARepositoryError):
            raise_for_result(CommandResult(0, NOT_A_REPO, ""))

    def test_output_error_builder(self):
        error = output_error("error: pathspec 'x' did not match any file(s) known to git", "checkout")
        assert isinstance(error, OutputError)
        assert error.kind == GitErrorKind.PATHSPEC_DID_NOT_MATCH
