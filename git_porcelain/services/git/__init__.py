"""Git operation services, one per command family."""

from .branches import BranchQueries
from .checkout import CheckoutService, ManualConflictResolution
from .clone import CloneService
from .config_values import GitConfigService
from .description import get_git_description, write_git_description
from .diagnostics import GitErrorKind, classify_output
from .history import HistoryService
from .merge import MergeService
from .probe import FilesystemStateProber, RepositoryStateProber
from .reflog import ReflogService
from .remotes import RemoteService
from .staging import StagingService
from .stash import StashService

__all__ = [
    "BranchQueries",
    "CheckoutService",
    "ManualConflictResolution",
    "CloneService",
    "GitConfigService",
    "get_git_description",
    "write_git_description",
    "GitErrorKind",
    "classify_output",
    "HistoryService",
    "MergeService",
    "FilesystemStateProber",
    "RepositoryStateProber",
    "ReflogService",
    "RemoteService",
    "StagingService",
    "StashService",
]
