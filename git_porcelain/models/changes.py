"""Working-tree change records."""
from enum import Enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ChangeKind(Enum):
    """Kind of change reported for a path by `git status`."""
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"
    TYPE_CHANGED = "type-changed"
    UNMERGED = "unmerged"
    IGNORED = "ignored"
    UNKNOWN = "unknown"  # also used for untracked files


@dataclass(frozen=True)
class FileChangeRecord:
    """A changed file in the working tree, identified by its absolute path."""
    url: Path
    change_kind: ChangeKind
    code: str = ""  # raw porcelain status code, e.g. "M", "AM", "??"
    original_path: Optional[str] = None  # source path of a rename or copy

    @property
    def name(self) -> str:
        return self.url.name
