"""Stash entry model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class StashEntry:
    """An entry of `git stash list`."""

    name: str  # e.g. "stash@{0}"
    stash_sha: str
    message: str
    branch_name: Optional[str] = None  # branch the stash was created on, if known
