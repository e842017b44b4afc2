"""Parser for `git stash list` output."""

import re
from typing import List

from git_porcelain.constants import LOG_FIELD_DELIMITER
from git_porcelain.models.stash import StashEntry

# "WIP on main: abc123 subject" / "On main: message"
_STASH_BRANCH_RE = re.compile(r"^(?:WIP on|On) (.+?): ")


def parse_stash_list(output: str) -> List[StashEntry]:
    entries = []
    for line in output.splitlines():
        if not line.strip():
            continue
        fields = line.split(LOG_FIELD_DELIMITER)
        if len(fields) < 3:
            continue

        name, sha, message = fields[0], fields[1], LOG_FIELD_DELIMITER.join(fields[2:])
        match = _STASH_BRANCH_RE.match(message)
        entries.append(
            StashEntry(
                name=name,
                stash_sha=sha,
                message=message,
                branch_name=match.group(1) if match else None,
            )
        )
    return entries
