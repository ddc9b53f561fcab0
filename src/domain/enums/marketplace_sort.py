"""Sort options offered by the marketplace listing."""

from enum import Enum


class MarketplaceSort(str, Enum):
    """Combined sort key and direction for marketplace designs."""

    NEWEST = "newest"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"
    RATING = "rating"

    def __str__(self) -> str:
        return self.value
