"""Index status codes as printed by `git diff-index --name-status`."""
from enum import Enum


class IndexStatus(Enum):
    """Possible statuses of an index entry."""
    UNKNOWN = "X"
    ADDED = "A"
    COPIED = "C"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    TYPE_CHANGED = "T"
    UNMERGED = "U"

    @property
    def is_rename_or_copy(self) -> bool:
        return self in (IndexStatus.RENAMED, IndexStatus.COPIED)
