"""API routes for wishlist updates."""

import logging
from fastapi import APIRouter, Depends

from wishlist_service.api.models import (
    MarkViewedResponse,
    NotFoundResponse,
)
from wishlist_service.core.models import WishlistUpdates
from wishlist_service.core.updates import summarize
from wishlist_service.storage.wishlist_store import WishlistStore, get_wishlist_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/wishlist", tags=["wishlist"])

NOT_FOUND = {404: {"model": NotFoundResponse, "description": "Wishlist not found"}}


@router.get(
    "/{wishlist_id}/updates",
    response_model=WishlistUpdates,
    responses=NOT_FOUND,
)
async def get_wishlist_updates(
    wishlist_id: str,
    store: WishlistStore = Depends(get_wishlist_store),
) -> WishlistUpdates:
    """
    Get products changed since the wishlist was last seen.

    A product counts as updated when it has at least one status flag
    and its changedAtDate is strictly after lastSeenAt.
    """
    wishlist = store.get(wishlist_id)
    updates = summarize(wishlist)

    logger.debug(
        f"Wishlist {wishlist_id}: {len(updates.updated_products)}/{len(updates.products)} updated"
    )
    return updates


@router.post(
    "/{wishlist_id}/view",
    response_model=MarkViewedResponse,
    responses=NOT_FOUND,
)
async def mark_wishlist_viewed(
    wishlist_id: str,
    store: WishlistStore = Depends(get_wishlist_store),
) -> MarkViewedResponse:
    """Record that the customer viewed the wishlist now."""
    wishlist = store.mark_viewed(wishlist_id)
    return MarkViewedResponse(
        wishlist_id=wishlist.wishlist_id,
        last_seen_at=wishlist.last_seen_at,
    )
