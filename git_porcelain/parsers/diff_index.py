"""Parser for `git diff-index --name-status -z` output."""

from typing import Dict

from git_porcelain.exceptions import IndexParseError, NoRenameIndexStatusError, UnknownIndexStatusError
from git_porcelain.models.index import IndexStatus


def get_index_status(status: str) -> IndexStatus:
    """Map a status code (first character counts, e.g. "R100") to IndexStatus."""
    try:
        return IndexStatus(status[:1])
    except ValueError:
        raise UnknownIndexStatusError(status) from None


def get_no_rename_index_status(status: str) -> IndexStatus:
    """Like get_index_status, but renames and copies are an error."""
    parsed = get_index_status(status)
    if parsed.is_rename_or_copy:
        raise NoRenameIndexStatusError(status)
    return parsed


def parse_diff_index(output: str) -> Dict[str, IndexStatus]:
    """Parse NUL-separated status/path pairs into a path -> status map.

    Raises:
        IndexParseError: unknown code, rename/copy code, or a status with no path
    """
    pieces = output.split("\0")
    if pieces and not pieces[-1].strip():
        pieces.pop()

    if len(pieces) % 2:
        raise IndexParseError(pieces[-1], f"Missing path after index status {pieces[-1]!r}")

    changes: Dict[str, IndexStatus] = {}
    for i in range(0, len(pieces), 2):
        changes[pieces[i + 1]] = get_no_rename_index_status(pieces[i].strip())
    return changes
