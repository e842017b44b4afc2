"""Parsers for checkout history read from the HEAD reflog."""

import re
from datetime import datetime
from typing import Dict, List

from git_porcelain.constants import REFLOG_DATE_FORMAT
from git_porcelain.logging_config import get_logger

logger = get_logger(__name__)

# "<sha> HEAD@{0}: checkout: moving from main to feature"
# "<sha> HEAD@{1}: Branch: renamed refs/heads/old to refs/heads/new"
_RECENT_BRANCH_RE = re.compile(
    r".*? (renamed|checkout)(?:: moving from|\s*) (?:refs/heads/|\s*)(.*?) to (?:refs/heads/|\s*)(.*?)$",
    re.IGNORECASE,
)

# "<sha> HEAD@{2024-01-02 10:00:00 +0100} checkout: moving from main to feature"
_CHECKOUT_RE = re.compile(r"^[a-z0-9]{40}\sHEAD@\{(.*)\}\scheckout: moving from\s.*\sto\s(.*)$")


def parse_recent_branches(output: str, limit: int) -> List[str]:
    """Return up to `limit` distinct branch names, newest checkout first.

    The intermediate name of a renamed branch is excluded.
    """
    names: List[str] = []
    excluded = set()

    for line in output.splitlines():
        match = _RECENT_BRANCH_RE.match(line.strip())
        if match:
            operation, from_name, to_name = match.groups()
            if operation.lower() == "renamed":
                excluded.add(from_name)
            if to_name and to_name not in excluded and to_name not in names:
                names.append(to_name)

        if len(names) >= limit:
            break

    return names


def parse_branch_checkouts(output: str) -> Dict[str, datetime]:
    """Map each checked-out branch to the time of its latest checkout."""
    checkouts: Dict[str, datetime] = {}
    for line in output.splitlines():
        match = _CHECKOUT_RE.match(line.strip())
        if not match:
            continue

        date_text, branch_name = match.groups()
        if branch_name in checkouts:
            continue
        try:
            checkouts[branch_name] = datetime.strptime(date_text, REFLOG_DATE_FORMAT)
        except ValueError:
            logger.debug(f"Skipping reflog entry with unexpected date {date_text!r}")

    return checkouts
