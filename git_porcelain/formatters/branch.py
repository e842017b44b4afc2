"""Branch name and type formatting utilities."""

from typing import Optional

from git_porcelain.constants import BRANCH_TYPE_COLORS, SYMBOL_CURRENT_BRANCH, SYMBOL_DEFAULT_BRANCH
from git_porcelain.models.branch import Branch, BranchType


def format_branch_name(name: str, is_current: bool = False, is_default: bool = False) -> str:
    """
    Format branch name with current and default branch indicators.

    Args:
        name: Branch name
        is_current: Whether this is the checked-out branch
        is_default: Whether this is the repository's default branch

    Returns:
        Formatted branch name
    """
    return (
        name
        + (SYMBOL_CURRENT_BRANCH if is_current else "")
        + (SYMBOL_DEFAULT_BRANCH if is_default else "")
    )


def format_branch_type(branch_type: BranchType) -> str:
    return branch_type.value


def get_branch_style(branch: Branch, current_branch: Optional[str] = None) -> Optional[str]:
    """Rich style for a branch row; the current branch is bold green."""
    if branch.type == BranchType.LOCAL and branch.name == current_branch:
        return "bold green"
    return BRANCH_TYPE_COLORS.get(branch.type.value)
