"""Update detection for wishlist products.

A product has an update relative to a wishlist when it carries at least one
status flag and its change timestamp is strictly later than the wishlist's
``lastSeenAt``. Timestamps are stored as raw ISO-8601 strings and parsed here;
anything missing or malformed counts as "no update" instead of an error.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from wishlist_service.core.models import ProductChange, Wishlist, WishlistUpdates

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse ISO-8601 text into an aware UTC datetime, or None."""
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.warning(f"Unparseable timestamp: {value!r}")
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format datetime as ISO-8601 UTC with milliseconds and Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current wall-clock time as ISO-8601 UTC."""
    return format_timestamp(datetime.now(timezone.utc))


def has_update(product: ProductChange, last_seen: datetime) -> bool:
    """Check whether product changed after ``last_seen``."""
    if not product.change_in_status:
        return False

    changed_at = parse_timestamp(product.changed_at_date)
    if changed_at is None:
        return False

    return changed_at > last_seen


def updated_products(wishlist: Wishlist) -> List[ProductChange]:
    """Products with updates since the wishlist was last seen, in order."""
    last_seen = parse_timestamp(wishlist.last_seen_at) or EPOCH
    return [p for p in wishlist.products if has_update(p, last_seen)]


def summarize(wishlist: Wishlist) -> WishlistUpdates:
    """Build the updates view for a wishlist."""
    updated = updated_products(wishlist)
    return WishlistUpdates(
        wishlist_id=wishlist.wishlist_id,
        last_seen_at=wishlist.last_seen_at,
        has_updates=len(updated) > 0,
        updated_products=updated,
        products=list(wishlist.products),
    )
