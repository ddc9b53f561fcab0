"""Lifecycle states of a freelancer application."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Review status of a freelancer application."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    def __str__(self) -> str:
        return self.value
