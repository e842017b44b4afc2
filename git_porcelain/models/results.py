"""Results of long-running operations (merge, clone)."""
from enum import Enum
from dataclasses import dataclass


class MergeResult(Enum):
    """The result of a merge operation."""
    SUCCESS = "success"
    ALREADY_UP_TO_DATE = "already-up-to-date"  # nothing to merge
    FAILED = "failed"  # most likely conflicts


class CloneProgressKind(Enum):
    """Phase of a clone as reported on git's progress output."""
    CLONING_INTO = "cloning-into"
    COUNTING = "counting"
    COMPRESSING = "compressing"
    RECEIVING = "receiving"
    RESOLVING_DELTAS = "resolving-deltas"
    OTHER = "other"


@dataclass(frozen=True)
class CloneProgressEvent:
    """A single clone progress update.

    `percent` is only meaningful for the counting, compressing, receiving and
    resolving phases; `line` keeps the raw text for every event.
    """
    kind: CloneProgressKind
    percent: int = 0
    line: str = ""

    @classmethod
    def cloning_into(cls, line: str = "") -> "CloneProgressEvent":
        return cls(CloneProgressKind.CLONING_INTO, 0, line)

    @classmethod
    def other(cls, line: str) -> "CloneProgressEvent":
        return cls(CloneProgressKind.OTHER, 0, line)

    @property
    def has_percent(self) -> bool:
        return self.kind not in (CloneProgressKind.CLONING_INTO, CloneProgressKind.OTHER)
