"""Changed-file formatting utilities."""

from pathlib import Path
from typing import Optional

from git_porcelain.constants import CHANGE_KIND_COLORS, CHANGE_KIND_SYMBOLS
from git_porcelain.models.changes import ChangeKind, FileChangeRecord


def format_change_kind(kind: ChangeKind) -> str:
    """
    Format a change kind as its one-letter status symbol.

    Args:
        kind: Change kind enum value

    Returns:
        Symbol such as "M" or "?"
    """
    return CHANGE_KIND_SYMBOLS.get(kind.value, kind.value)


def get_change_style(kind: ChangeKind) -> Optional[str]:
    return CHANGE_KIND_COLORS.get(kind.value)


def format_change_path(record: FileChangeRecord, root=None) -> str:
    """
    Format a changed file's path relative to `root`, showing rename sources.

    Example:
        "docs/new.md <- docs/old.md"
    """
    path = record.url
    if root is not None:
        try:
            path = record.url.relative_to(Path(root))
        except ValueError:
            pass
    text = str(path)
    if record.original_path:
        text += f" <- {record.original_path}"
    return text
