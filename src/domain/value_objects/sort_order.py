"""Ordering value object for admin listings."""

from dataclasses import dataclass

from domain.enums import SortDirection


@dataclass(frozen=True)
class SortOrder:
    """A single validated sort key with its direction."""

    field: str
    direction: SortDirection = SortDirection.DESC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC

    def __str__(self) -> str:
        return f"{self.field} {self.direction}"
