"""Clone progress formatting utilities."""

from git_porcelain.models.results import CloneProgressEvent, CloneProgressKind

_PHASE_LABELS = {
    CloneProgressKind.CLONING_INTO: "Cloning",
    CloneProgressKind.COUNTING: "Counting objects",
    CloneProgressKind.COMPRESSING: "Compressing objects",
    CloneProgressKind.RECEIVING: "Receiving objects",
    CloneProgressKind.RESOLVING_DELTAS: "Resolving deltas",
}


def format_progress_description(event: CloneProgressEvent) -> str:
    """Label for a progress bar task; unrecognised lines are shown as is."""
    return _PHASE_LABELS.get(event.kind, event.line)
