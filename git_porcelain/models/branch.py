"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class BranchType(Enum):
    """Where a branch lives."""
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class Branch:
    """A local or remote-tracking branch.

    Two branches are the same branch when name and type match; the ref,
    upstream and tip are snapshot data and do not take part in equality.
    """
    name: str
    type: BranchType
    ref: str
    remote_name: Optional[str] = None
    upstream: Optional[str] = None  # e.g. "origin/main" for a tracking local branch
    tip: Optional[str] = None  # commit sha the branch points at

    def __eq__(self, other):
        if not isinstance(other, Branch):
            return NotImplemented
        return (self.name, self.type) == (other.name, other.type)

    def __hash__(self):
        return hash((self.name, self.type))

    @property
    def name_without_remote(self) -> str:
        """Branch name with the "<remote>/" prefix removed for remote branches."""
        if self.type == BranchType.REMOTE and self.remote_name:
            prefix = f"{self.remote_name}/"
            if self.name.startswith(prefix):
                return self.name[len(prefix):]
        return self.name

    @property
    def is_local(self) -> bool:
        return self.type == BranchType.LOCAL

    def __str__(self) -> str:
        return self.name
