"""Commit history model."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class CommitHistory:
    """One entry of `git log` output."""
    hash: str
    commit_hash: str
    message: str
    author: str
    author_email: str
    committer: str
    committer_email: str
    date: Optional[datetime]  # None if git printed a date we could not parse
    remote_url: Optional[str] = None
    is_merge: Optional[bool] = None
