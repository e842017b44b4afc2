"""Parser for `git status --porcelain` output."""

import re
from pathlib import Path
from typing import List, Optional

from git_porcelain.exceptions import URLDecodeError
from git_porcelain.models.changes import ChangeKind, FileChangeRecord

_CODE_KINDS = {
    "M": ChangeKind.MODIFIED,
    "A": ChangeKind.ADDED,
    "D": ChangeKind.DELETED,
    "R": ChangeKind.RENAMED,
    "C": ChangeKind.COPIED,
    "T": ChangeKind.TYPE_CHANGED,
    "U": ChangeKind.UNMERGED,
}

# Both-sides codes git uses for conflicted paths
_UNMERGED_CODES = {"DD", "AU", "UD", "UA", "DU", "AA", "UU"}

_RENAME_SEPARATOR = " -> "

_QUOTED_TOKEN_RE = re.compile(r'\\([0-7]{3})|\\(.)|([^\\]+)', re.DOTALL)
_SIMPLE_ESCAPES = {
    "a": b"\a", "b": b"\b", "f": b"\f", "n": b"\n",
    "r": b"\r", "t": b"\t", "v": b"\v", '"': b'"', "\\": b"\\",
}


def _unquote_path(path: str) -> str:
    """Undo git's C-style quoting of unusual file names."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    raw = bytearray()
    for octal, escaped, plain in _QUOTED_TOKEN_RE.findall(path[1:-1]):
        if octal:
            raw.append(int(octal, 8))
        elif escaped:
            raw += _SIMPLE_ESCAPES.get(escaped, escaped.encode("utf-8"))
        else:
            raw += plain.encode("utf-8")
    return raw.decode("utf-8", errors="replace")


def parse_status_code(code: str) -> ChangeKind:
    """Map a porcelain status code to a ChangeKind.

    Single letters map directly. For two-column codes the index column wins
    over the worktree column, so "AM" is an addition and " M" a modification.
    """
    if code == "??":
        return ChangeKind.UNKNOWN
    if code == "!!":
        return ChangeKind.IGNORED
    if code in _UNMERGED_CODES:
        return ChangeKind.UNMERGED

    for char in code:
        if char in _CODE_KINDS:
            return _CODE_KINDS[char]
    return ChangeKind.UNKNOWN


def _parse_line(line: str, directory: Path) -> FileChangeRecord:
    parts = line.split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise URLDecodeError(line)

    code, filename = parts[0], parts[1].strip()
    kind = parse_status_code(code)

    original_path: Optional[str] = None
    if kind in (ChangeKind.RENAMED, ChangeKind.COPIED) and _RENAME_SEPARATOR in filename:
        original, filename = filename.split(_RENAME_SEPARATOR, 1)
        original_path = _unquote_path(original)

    filename = _unquote_path(filename)
    if not filename or "\x00" in filename:
        raise URLDecodeError(line)

    return FileChangeRecord(
        url=directory / filename,
        change_kind=kind,
        code=code,
        original_path=original_path,
    )


def parse_status(output: str, directory) -> List[FileChangeRecord]:
    """Parse `git status --porcelain` output into change records.

    Args:
        output: Raw command output, one "<code> <filename>" entry per line
        directory: Repository working directory the filenames are relative to

    Returns:
        One FileChangeRecord per non-empty line, in output order

    Raises:
        URLDecodeError: a line carries no usable filename
    """
    directory = Path(directory)
    return [
        _parse_line(line.strip(), directory)
        for line in output.splitlines()
        if line.strip()
    ]
