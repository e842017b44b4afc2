"""Classification of git diagnostics.

Git reports most failures as free text, so every operation hands its output
to the helpers here instead of checking substrings itself.
"""

import re
from enum import Enum
from typing import Optional

from git_porcelain.constants import FATAL_MARKER, NOT_A_REPOSITORY_MARKER
from git_porcelain.exceptions import NotARepositoryError, OutputError
from git_porcelain.logging_config import get_logger

logger = get_logger(__name__)


class GitErrorKind(Enum):
    """Known git diagnostics, matched as regular expressions against output."""

    NOT_A_GIT_REPOSITORY = r"fatal: not a git repository"
    SSH_AUTHENTICATION_FAILED = r"fatal: Authentication failed"
    SSH_PERMISSION_DENIED = r"fatal: Could not read from remote repository\."
    REMOTE_DISCONNECTION = r"fatal: [Tt]he remote end hung up unexpectedly"
    HOST_DOWN = r"fatal: unable to access '(.+)': Could not resolve host: (.+)"
    REPOSITORY_NOT_FOUND = r"(fatal: repository '(.+)' not found|ERROR: Repository not found)"
    MERGE_CONFLICTS = r"(Merge conflict|Automatic merge failed; fix conflicts and then commit the result)"
    REBASE_CONFLICTS = r"Resolve all conflicts manually, mark them as resolved with"
    PUSH_NOT_FAST_FORWARD = r"\((non-fast-forward|fetch first)\)\nerror: failed to push some refs to '.*'"
    BRANCH_DELETION_FAILED = r"error: unable to delete '(.+)': remote ref does not exist"
    NOTHING_TO_COMMIT = r"nothing to commit"
    INVALID_MERGE = r"merge: (.+) - not something we can merge"
    BRANCH_ALREADY_EXISTS = r"fatal: [Aa] branch named '(.+)' already exists\.?"
    BAD_REVISION = r"fatal: bad revision '(.*)'"
    UNRELATED_HISTORIES = r"fatal: refusing to merge unrelated histories"
    BRANCH_RENAME_FAILED = r"fatal: Branch rename failed"
    PATH_DOES_NOT_EXIST = r"fatal: path '(.+)' does not exist"
    PATHSPEC_DID_NOT_MATCH = r"error: pathspec '(.+)' did not match any file\(s\) known to git"
    INVALID_OBJECT_NAME = r"fatal: invalid object name '(.+)'"
    OUTSIDE_REPOSITORY = r"fatal: .+: '(.+)' is outside repository"
    LOCK_FILE_EXISTS = r"Another git process seems to be running in this repository"
    NO_MERGE_TO_ABORT = r"fatal: There is no merge to abort"
    LOCAL_CHANGES_OVERWRITTEN = (
        r"error: (?:Your local changes to the following|The following untracked working tree) "
        r"files would be overwritten by (?:checkout|merge)"
    )
    UNRESOLVED_CONFLICTS = (
        r"(You must edit all merge conflicts and then\nmark them as resolved using git add"
        r"|fatal: Exiting because of an unresolved conflict)"
    )
    REMOTE_ALREADY_EXISTS = r"error: remote (.+) already exists\."
    NO_SUCH_REMOTE = r"error: No such remote:? '?(.+?)'?$"
    TAG_ALREADY_EXISTS = r"fatal: tag '(.+)' already exists"
    UNSAFE_DIRECTORY = r"fatal: detected dubious ownership in repository at (.+)"
    CONFIG_LOCK_FILE_EXISTS = r"error: could not lock config file (.+): File exists"
    GPG_FAILED_TO_SIGN = r"error: gpg failed to sign the data"

    @property
    def pattern(self) -> "re.Pattern":
        return _COMPILED[self]


_COMPILED = {kind: re.compile(kind.value, re.MULTILINE) for kind in GitErrorKind}

# git's own fatal diagnostics, not file or ref names that contain the word
_FATAL_RE = re.compile(rf"^{FATAL_MARKER}:", re.MULTILINE)


def classify_output(output: str) -> Optional[GitErrorKind]:
    """Return the first known diagnostic found in `output`, or None."""
    for kind in GitErrorKind:
        if kind.pattern.search(output):
            return kind
    return None


def is_not_a_repository(output: str) -> bool:
    return NOT_A_REPOSITORY_MARKER in output


def is_fatal(output: str) -> bool:
    return bool(_FATAL_RE.search(output))


def ensure_repository(output: str, directory=None) -> str:
    """Raise NotARepositoryError if git said the directory is not a repository.

    Returns the output unchanged so calls can be chained.
    """
    if is_not_a_repository(output):
        raise NotARepositoryError(str(directory) if directory is not None else None)
    return output


def raise_for_output(output: str, operation: Optional[str] = None, directory=None) -> str:
    """Raise the matching error if `output` carries a failure marker.

    The not-a-repository marker wins over anything else in the text; any
    line starting with ``fatal:`` makes it an OutputError, tagged with its
    classified kind when one is known.
    """
    ensure_repository(output, directory)
    if is_fatal(output):
        kind = classify_output(output)
        logger.debug(f"{operation or 'git'} failed ({kind.name if kind else 'unclassified'})")
        raise OutputError(output, operation=operation, kind=kind)
    return output


def output_error(output: str, operation: Optional[str] = None) -> OutputError:
    """Build an OutputError for output that failed an operation's own check."""
    return OutputError(output, operation=operation, kind=classify_output(output))


def raise_for_result(result, operation: Optional[str] = None, directory=None):
    """Raise the matching error for a CommandResult.

    The not-a-repository marker is looked for in the combined output, the
    fatal marker only in stderr: stdout echoes file names, ref names and
    commit subjects.
    """
    ensure_repository(result.output, directory)
    raise_for_output(result.stderr, operation, directory)
    return result
