"""Parsers that turn git's textual output into git-porcelain records.

Every function here is pure: text in, records out. Organised by command
family:
- status: `git status --porcelain`
- log: `git log` with a field-delimited pretty format
- refs: `git for-each-ref` branch listings
- diff_index: `git diff-index --name-status -z`
- progress: `git clone --progress` output
- remotes: `git remote -v`
- reflog: checkout history from the HEAD reflog
- stash: `git stash list`
"""

from .status import parse_status, parse_status_code
from .log import parse_log, parse_log_date
from .refs import parse_branch_refs, parse_ref_line
from .diff_index import get_index_status, get_no_rename_index_status, parse_diff_index
from .progress import parse_clone_progress, parse_percent
from .remotes import parse_remotes
from .reflog import parse_recent_branches, parse_branch_checkouts
from .stash import parse_stash_list

__all__ = [
    # Status
    "parse_status",
    "parse_status_code",
    # Log
    "parse_log",
    "parse_log_date",
    # Refs
    "parse_branch_refs",
    "parse_ref_line",
    # Diff-index
    "get_index_status",
    "get_no_rename_index_status",
    "parse_diff_index",
    # Clone progress
    "parse_clone_progress",
    "parse_percent",
    # Remotes
    "parse_remotes",
    # Reflog
    "parse_recent_branches",
    "parse_branch_checkouts",
    # Stash
    "parse_stash_list",
]
