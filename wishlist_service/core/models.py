"""Core data models."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChangeStatus(str, Enum):
    """Known product status flags.

    Products may carry flags outside this list; they are passed through as-is.
    """

    SALE = "Sale"
    NOT_ON_SALE = "NotOnSale"
    NO_STOCK = "NoStock"
    LOW_STOCK = "LowStock"
    BACK_IN_STOCK = "BackInStock"
    HIGH_STOCK = "HighStock"


KNOWN_STATUSES = ", ".join(status.value for status in ChangeStatus)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductChange(CamelModel):
    """Product in a wishlist with its latest status change."""

    product_id: str
    change_in_status: List[str] = Field(
        default_factory=list,
        description=f"Active status flags, e.g. {KNOWN_STATUSES}; other strings are allowed",
        examples=[[ChangeStatus.SALE.value, ChangeStatus.LOW_STOCK.value]],
    )
    changed_at_date: Optional[str] = None  # ISO-8601 UTC, kept raw


class Wishlist(CamelModel):
    """Wishlist record as held by the store."""

    wishlist_id: str
    last_seen_at: Optional[str] = None  # ISO-8601 UTC, kept raw
    products: List[ProductChange] = Field(default_factory=list)


class WishlistUpdates(CamelModel):
    """Wishlist with the products changed since it was last seen."""

    wishlist_id: str
    last_seen_at: Optional[str] = None
    has_updates: bool
    updated_products: List[ProductChange] = Field(default_factory=list)
    products: List[ProductChange] = Field(default_factory=list)
