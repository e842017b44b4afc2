"""Translation of `git clone --progress` lines into progress events."""

from git_porcelain.models.results import CloneProgressEvent, CloneProgressKind

# Checked in this order; the first marker found in a line wins
_PERCENT_MARKERS = (
    ("Counting objects: ", CloneProgressKind.COUNTING),
    ("Compressing objects: ", CloneProgressKind.COMPRESSING),
    ("Receiving objects: ", CloneProgressKind.RECEIVING),
    ("Resolving deltas: ", CloneProgressKind.RESOLVING_DELTAS),
)


def parse_percent(text: str) -> int:
    """Read the leading percentage from text like " 42% (420/1000)".

    Anything unparseable yields 0 rather than an error.
    """
    value = text.replace(" ", "").split("%", 1)[0]
    try:
        percent = int(value)
    except ValueError:
        return 0
    return max(0, min(100, percent))


def parse_clone_progress(line: str) -> CloneProgressEvent:
    """Map one progress fragment to a CloneProgressEvent."""
    if "Cloning into" in line:
        return CloneProgressEvent.cloning_into(line)

    for marker, kind in _PERCENT_MARKERS:
        if marker in line:
            return CloneProgressEvent(kind, parse_percent(line.split(marker, 1)[1]), line)

    return CloneProgressEvent.other(line)
