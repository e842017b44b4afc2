"""The repository description stored in ``.git/description``."""

from pathlib import Path

from git_porcelain.constants import DEFAULT_GIT_DESCRIPTION, DESCRIPTION_FILE, GIT_DIR_NAME
from git_porcelain.logging_config import get_logger

logger = get_logger(__name__)


def _description_path(repo_path) -> Path:
    return Path(repo_path) / GIT_DIR_NAME / DESCRIPTION_FILE


def get_git_description(repo_path) -> str:
    """The repository description, or "" if missing or still git's placeholder."""
    path = _description_path(repo_path)
    try:
        description = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""

    if description == DEFAULT_GIT_DESCRIPTION:
        return ""
    return description


def write_git_description(repo_path, description: str) -> None:
    path = _description_path(repo_path)
    path.write_text(description, encoding="utf-8")
    logger.debug(f"Wrote description to {path}")
