"""Core repository models for git-porcelain."""

from .git_client import GitClient
from .repository_state import RefreshResult, RepositoryState, compute_recent_branches
from .change_tracking import ChangeTracker, TrackerState

__all__ = [
    "GitClient",
    "RefreshResult",
    "RepositoryState",
    "compute_recent_branches",
    "ChangeTracker",
    "TrackerState",
]
