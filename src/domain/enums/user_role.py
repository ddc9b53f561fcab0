"""Marketplace roles a user can hold."""

from enum import Enum


class UserRole(str, Enum):
    """Seller-side role of a user. Independent from the admin flag."""

    BUYER = "BUYER"
    FREELANCER = "FREELANCER"

    def __str__(self) -> str:
        return self.value
