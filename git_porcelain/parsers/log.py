"""Parser for `git log` output written with a delimited pretty format."""

from datetime import datetime
from typing import List, Optional

from git_porcelain.constants import LOG_DATE_FORMAT, LOG_FIELD_DELIMITER
from git_porcelain.logging_config import get_logger
from git_porcelain.models.commit import CommitHistory

logger = get_logger(__name__)

_FIELD_COUNT = 9


def parse_log_date(value: str) -> Optional[datetime]:
    """Parse an RFC 2822 style date (git's %aD), or return None."""
    try:
        return datetime.strptime(value.strip(), LOG_DATE_FORMAT)
    except ValueError:
        logger.debug(f"Could not parse commit date {value!r}")
        return None


def parse_log(output: str, remote_url: Optional[str] = None) -> List[CommitHistory]:
    """Parse log lines produced with LOG_PRETTY_FORMAT.

    Fields are short hash, full hash, subject, author name, author email,
    committer name, committer email, author date and parent hashes.
    """
    commits = []
    for line in output.splitlines():
        if not line.strip():
            continue

        fields = line.split(LOG_FIELD_DELIMITER)
        has_parents = len(fields) >= _FIELD_COUNT
        fields += [""] * (_FIELD_COUNT - len(fields))

        commits.append(
            CommitHistory(
                hash=fields[0],
                commit_hash=fields[1],
                message=fields[2],
                author=fields[3],
                author_email=fields[4],
                committer=fields[5],
                committer_email=fields[6],
                date=parse_log_date(fields[7]),
                remote_url=remote_url,
                is_merge=len(fields[8].split()) > 1 if has_parents else None,
            )
        )
    return commits
