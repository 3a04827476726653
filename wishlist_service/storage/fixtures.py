"""Seed wishlists for the mock store."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from wishlist_service.core.models import Wishlist

logger = logging.getLogger(__name__)


class FixtureLoadError(RuntimeError):
    """Seed file could not be read or validated."""


# changeInStatus: [] means no active flags.
# Dec 2025 changes are "new", Sep/Oct/Nov 2025 changes are old.
SEED_WISHLISTS: List[dict] = [
    # No updates: only old changes, no flags
    {
        "wishlistId": "111",
        "lastSeenAt": "2025-12-09T12:30:00Z",
        "products": [
            {"productId": "P11101", "changeInStatus": [], "changedAtDate": "2025-10-15T09:00:00Z"},
            {"productId": "P11102", "changeInStatus": [], "changedAtDate": "2025-09-17T09:00:00Z"},
        ],
    },
    # One product on sale
    {
        "wishlistId": "222",
        "lastSeenAt": "2025-12-09T09:00:00Z",
        "products": [
            {"productId": "P22201", "changeInStatus": ["Sale"], "changedAtDate": "2025-12-10T08:00:00Z"},
            {"productId": "P22202", "changeInStatus": [], "changedAtDate": "2025-10-15T10:00:00Z"},
        ],
    },
    # One product low on stock
    {
        "wishlistId": "333",
        "lastSeenAt": "2025-12-08T18:00:00Z",
        "products": [
            {"productId": "P33301", "changeInStatus": ["LowStock"], "changedAtDate": "2025-12-09T23:30:00Z"},
            {"productId": "P33302", "changeInStatus": [], "changedAtDate": "2025-11-12T09:15:00Z"},
        ],
    },
    # Sale + LowStock combined
    {
        "wishlistId": "444",
        "lastSeenAt": "2025-12-07T10:00:00Z",
        "products": [
            {"productId": "P44401", "changeInStatus": ["Sale", "LowStock"], "changedAtDate": "2025-12-09T08:45:00Z"},
            {"productId": "P44402", "changeInStatus": [], "changedAtDate": "2025-09-20T11:00:00Z"},
        ],
    },
    # One out of stock, rest unchanged
    {
        "wishlistId": "555",
        "lastSeenAt": "2025-12-05T14:00:00Z",
        "products": [
            {"productId": "P55501", "changeInStatus": ["NoStock"], "changedAtDate": "2025-12-09T16:00:00Z"},
            {"productId": "P55502", "changeInStatus": [], "changedAtDate": "2025-10-01T10:00:00Z"},
            {"productId": "P55503", "changeInStatus": [], "changedAtDate": "2025-09-10T10:00:00Z"},
        ],
    },
    # Flags present but all changed before lastSeenAt
    {
        "wishlistId": "666",
        "lastSeenAt": "2025-12-10T09:00:00Z",
        "products": [
            {"productId": "P66601", "changeInStatus": ["Sale"], "changedAtDate": "2025-12-05T12:00:00Z"},
            {"productId": "P66602", "changeInStatus": ["LowStock"], "changedAtDate": "2025-12-01T09:30:00Z"},
        ],
    },
    # Back in stock
    {
        "wishlistId": "777",
        "lastSeenAt": "2025-12-01T08:00:00Z",
        "products": [
            {"productId": "P77701", "changeInStatus": ["BackInStock"], "changedAtDate": "2025-12-08T10:30:00Z"},
            {"productId": "P77702", "changeInStatus": [], "changedAtDate": "2025-09-25T07:45:00Z"},
        ],
    },
    # Several products with combined flags
    {
        "wishlistId": "888",
        "lastSeenAt": "2025-12-09T06:00:00Z",
        "products": [
            {"productId": "P88801", "changeInStatus": ["Sale", "BackInStock"], "changedAtDate": "2025-12-10T07:00:00Z"},
            {"productId": "P88802", "changeInStatus": ["HighStock"], "changedAtDate": "2025-12-09T20:15:00Z"},
            {"productId": "P88803", "changeInStatus": [], "changedAtDate": "2025-10-10T09:00:00Z"},
        ],
    },
    # Empty wishlist
    {
        "wishlistId": "999",
        "lastSeenAt": "2025-12-09T12:00:00Z",
        "products": [],
    },
    # Mixed: one new, one old, one without flags
    {
        "wishlistId": "1000",
        "lastSeenAt": "2025-12-08T12:00:00Z",
        "products": [
            {"productId": "P100001", "changeInStatus": ["Sale"], "changedAtDate": "2025-12-09T13:00:00Z"},
            {"productId": "P100002", "changeInStatus": ["LowStock"], "changedAtDate": "2025-11-01T09:00:00Z"},
            {"productId": "P100003", "changeInStatus": [], "changedAtDate": "2025-10-05T09:00:00Z"},
        ],
    },
]


def _parse_wishlists(raw: Any) -> List[Wishlist]:
    """Validate raw seed data (list, or mapping keyed by wishlist id)."""
    if isinstance(raw, dict):
        items = []
        for wishlist_id, record in raw.items():
            if not isinstance(record, dict):
                raise FixtureLoadError(f"Wishlist {wishlist_id!r} is not an object")
            items.append({"wishlistId": wishlist_id, **record})
    elif isinstance(raw, list):
        items = raw
    else:
        raise FixtureLoadError("Seed data must be a list or an object of wishlists")

    try:
        return [Wishlist.model_validate(item) for item in items]
    except ValidationError as e:
        raise FixtureLoadError(f"Invalid wishlist seed data: {e}") from e


def load_seed_wishlists(path: Optional[str] = None) -> List[Wishlist]:
    """Load seed wishlists from a JSON file, or the built-in fixtures."""
    if not path:
        return _parse_wishlists(SEED_WISHLISTS)

    fixtures_file = Path(path)
    logger.info(f"Loading wishlist fixtures from {fixtures_file}")

    try:
        raw = json.loads(fixtures_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FixtureLoadError(f"Cannot read fixtures file {fixtures_file}: {e}") from e

    return _parse_wishlists(raw)
