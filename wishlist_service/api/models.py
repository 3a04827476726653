"""API request/response models."""

from typing import Optional

from wishlist_service.core.models import CamelModel

VIEWED_MESSAGE = "Wishlist last seen date updated"
NOT_FOUND_ERROR = "Wishlist not found"


class MarkViewedResponse(CamelModel):
    """Response for mark-viewed action."""

    wishlist_id: str
    last_seen_at: Optional[str] = None
    message: str = VIEWED_MESSAGE


class NotFoundResponse(CamelModel):
    """Error body for unknown wishlist id."""

    error: str = NOT_FOUND_ERROR
    wishlist_id: str
