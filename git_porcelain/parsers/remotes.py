"""Parser for `git remote -v` output."""

from typing import List

from git_porcelain.models.remote import Remote

_FETCH_SUFFIX = "(fetch)"


def parse_remotes(output: str) -> List[Remote]:
    """Return one Remote per fetch line, sorted by name."""
    remotes = {}
    for line in output.splitlines():
        line = line.strip()
        if not line.endswith(_FETCH_SUFFIX):
            continue

        name, _, rest = line.partition("\t")
        if not rest:
            name, _, rest = line.partition(" ")
        url = rest[: -len(_FETCH_SUFFIX)].strip()
        if name and url and name not in remotes:
            remotes[name] = Remote(name=name, url=url)

    return sorted(remotes.values(), key=lambda remote: remote.name)
