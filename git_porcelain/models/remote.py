"""Remote data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Remote:
    """A configured remote."""

    name: str
    url: str

    def __str__(self) -> str:
        return f"{self.name}\t{self.url}"
