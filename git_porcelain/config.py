"""Configuration handling for git-porcelain"""

from dataclasses import dataclass

from git_porcelain.constants import (
    DEFAULT_BRANCH_NAME,
    DEFAULT_REMOTE_NAME,
    RECENT_BRANCHES_LIMIT,
    REFLOG_SCAN_LIMIT,
)


@dataclass
class Config:
    """Configuration for git-porcelain with validation."""

    # Default branch resolution
    default_branch: str = DEFAULT_BRANCH_NAME
    default_remote: str = DEFAULT_REMOTE_NAME

    # Recent branch history
    recent_branches_limit: int = RECENT_BRANCHES_LIMIT
    reflog_scan_limit: int = REFLOG_SCAN_LIMIT

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_default_branch()
        self._validate_default_remote()
        self._validate_recent_branches_limit()
        self._validate_reflog_scan_limit()

    def _validate_default_branch(self):
        """Validate default_branch is not empty."""
        if not self.default_branch or not self.default_branch.strip():
            raise ValueError("default_branch cannot be empty")
        self.default_branch = self.default_branch.strip()

    def _validate_default_remote(self):
        """Validate default_remote is not empty."""
        if not self.default_remote or not self.default_remote.strip():
            raise ValueError("default_remote cannot be empty")
        self.default_remote = self.default_remote.strip()

    def _validate_recent_branches_limit(self):
        """Validate recent_branches_limit is positive."""
        if self.recent_branches_limit <= 0:
            raise ValueError(
                f"recent_branches_limit must be positive, got {self.recent_branches_limit}"
            )

    def _validate_reflog_scan_limit(self):
        """Validate reflog_scan_limit covers at least the recent branch limit."""
        if self.reflog_scan_limit <= self.recent_branches_limit:
            raise ValueError(
                f"reflog_scan_limit must be greater than recent_branches_limit, got {self.reflog_scan_limit}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "default_branch": self.default_branch,
            "default_remote": self.default_remote,
            "recent_branches_limit": self.recent_branches_limit,
            "reflog_scan_limit": self.reflog_scan_limit,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "default_branch",
            "default_remote",
            "recent_branches_limit",
            "reflog_scan_limit",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
