"""Data models for git-porcelain."""

from .branch import Branch, BranchType
from .changes import ChangeKind, FileChangeRecord
from .commit import CommitHistory
from .index import IndexStatus
from .remote import Remote
from .results import CloneProgressEvent, CloneProgressKind, MergeResult
from .stash import StashEntry

__all__ = [
    "Branch",
    "BranchType",
    "ChangeKind",
    "FileChangeRecord",
    "CommitHistory",
    "IndexStatus",
    "Remote",
    "CloneProgressEvent",
    "CloneProgressKind",
    "MergeResult",
    "StashEntry",
]
