"""Ordering direction for admin listings."""

from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value
