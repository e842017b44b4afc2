"""Formatting utilities for git-porcelain.

Organised by what is being shown:
- date: Date formatting
- branch: Branch name and type formatting
- changes: Changed-file formatting
- progress: Clone progress descriptions
"""

# Date formatters
from .date import format_date

# Branch formatters
from .branch import format_branch_name, format_branch_type, get_branch_style

# Change formatters
from .changes import format_change_kind, format_change_path, get_change_style

# Progress formatters
from .progress import format_progress_description

__all__ = [
    # Date
    "format_date",
    # Branch
    "format_branch_name",
    "format_branch_type",
    "get_branch_style",
    # Changes
    "format_change_kind",
    "format_change_path",
    "get_change_style",
    # Progress
    "format_progress_description",
]
