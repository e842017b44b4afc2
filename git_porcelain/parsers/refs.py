"""Parser for branch listings from `git for-each-ref`."""

from typing import Dict, List, Optional, Tuple

from git_porcelain.constants import LOCAL_REF_PREFIX, REMOTE_REF_PREFIX
from git_porcelain.models.branch import Branch, BranchType

_FIELD_DELIMITER = "\x1f"
_FIELD_COUNT = 5


def parse_ref_line(line: str) -> Optional[Branch]:
    """Parse one line written with BRANCH_REF_FORMAT.

    A bare refname (no delimiters) is accepted too. Symbolic refs such as
    ``refs/remotes/origin/HEAD`` and refs outside the branch namespaces
    return None.
    """
    fields = line.strip().split(_FIELD_DELIMITER)
    fields += [""] * (_FIELD_COUNT - len(fields))
    refname, _short, upstream, tip, symref = fields[:_FIELD_COUNT]

    if not refname or symref:
        return None

    if refname.startswith(LOCAL_REF_PREFIX):
        return Branch(
            name=refname[len(LOCAL_REF_PREFIX):],
            type=BranchType.LOCAL,
            ref=refname,
            upstream=upstream or None,
            tip=tip or None,
        )

    if refname.startswith(REMOTE_REF_PREFIX):
        remote_name, _, branch_name = refname[len(REMOTE_REF_PREFIX):].partition("/")
        if not remote_name or not branch_name or branch_name == "HEAD":
            return None
        return Branch(
            name=f"{remote_name}/{branch_name}",
            type=BranchType.REMOTE,
            ref=refname,
            remote_name=remote_name,
            tip=tip or None,
        )

    return None


def parse_branch_refs(local_output: str, remote_output: str = "") -> List[Branch]:
    """Merge local and remote ref listings into one de-duplicated branch list.

    Order is local branches first, then remote branches, each in listing
    order. A branch appearing twice keeps its first entry.
    """
    branches: Dict[Tuple[str, BranchType], Branch] = {}
    for output in (local_output, remote_output):
        for line in output.splitlines():
            branch = parse_ref_line(line)
            if branch is not None and (branch.name, branch.type) not in branches:
                branches[(branch.name, branch.type)] = branch
    return list(branches.values())
