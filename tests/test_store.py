import json
from datetime import datetime, timedelta, timezone

import pytest

from wishlist_service.core.updates import parse_timestamp
from wishlist_service.storage.fixtures import FixtureLoadError, load_seed_wishlists
from wishlist_service.storage.wishlist_store import WishlistNotFoundError, WishlistStore

SEED_IDS = ["111", "222", "333", "444", "555", "666", "777", "888", "999", "1000"]


def test_builtin_fixtures_seeded(store: WishlistStore):
    assert store.ids() == SEED_IDS
    assert len(store) == 10
    assert "222" in store
    assert "nope" not in store


def test_get_unknown_raises_not_found(store: WishlistStore):
    with pytest.raises(WishlistNotFoundError) as exc_info:
        store.get("nope")
    assert exc_info.value.wishlist_id == "nope"


def test_get_returns_copy(store: WishlistStore):
    wishlist = store.get("222")
    wishlist.last_seen_at = "1999-01-01T00:00:00Z"
    wishlist.products.clear()

    fresh = store.get("222")
    assert fresh.last_seen_at == "2025-12-09T09:00:00Z"
    assert len(fresh.products) == 2


def test_mark_viewed_updates_last_seen(store: WishlistStore):
    now = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    wishlist = store.mark_viewed("222", now=now)

    assert wishlist.last_seen_at == "2026-01-02T03:04:05.000Z"
    assert store.get("222").last_seen_at == "2026-01-02T03:04:05.000Z"
    # Other records untouched
    assert store.get("333").last_seen_at == "2025-12-08T18:00:00Z"


def test_mark_viewed_overwrites_future_last_seen(tmp_path):
    path = tmp_path / "wishlists.json"
    path.write_text(json.dumps([{"wishlistId": "f", "lastSeenAt": "2099-01-01T00:00:00Z", "products": []}]))
    store = WishlistStore.from_fixtures(str(path))

    now = datetime(2026, 1, 2, tzinfo=timezone.utc)
    wishlist = store.mark_viewed("f", now=now)

    assert wishlist.last_seen_at == "2026-01-02T00:00:00.000Z"
    assert store.get("f").last_seen_at == "2026-01-02T00:00:00.000Z"


def test_mark_viewed_later_call_writes_later_time(store: WishlistStore):
    earlier = datetime(2026, 1, 2, tzinfo=timezone.utc)
    first = store.mark_viewed("222", now=earlier)
    second = store.mark_viewed("222", now=earlier + timedelta(seconds=1))

    assert parse_timestamp(second.last_seen_at) > parse_timestamp(first.last_seen_at)


def test_mark_viewed_without_now_uses_clock(store: WishlistStore):
    before = datetime.now(timezone.utc).replace(microsecond=0)
    wishlist = store.mark_viewed("999")
    assert parse_timestamp(wishlist.last_seen_at) >= before


def test_mark_viewed_unknown_raises_not_found(store: WishlistStore):
    with pytest.raises(WishlistNotFoundError):
        store.mark_viewed("nope")


def test_load_fixtures_from_list_file(tmp_path):
    path = tmp_path / "wishlists.json"
    path.write_text(
        json.dumps(
            [
                {
                    "wishlistId": "abc",
                    "lastSeenAt": "2025-12-01T00:00:00Z",
                    "products": [{"productId": "X1", "changeInStatus": ["Sale"], "changedAtDate": "2025-12-02T00:00:00Z"}],
                }
            ]
        )
    )
    store = WishlistStore.from_fixtures(str(path))

    assert store.ids() == ["abc"]
    assert store.get("abc").products[0].change_in_status == ["Sale"]


def test_load_fixtures_from_mapping_file(tmp_path):
    path = tmp_path / "wishlists.json"
    path.write_text(json.dumps({"w1": {"lastSeenAt": "2025-12-01T00:00:00Z", "products": []}}))

    [wishlist] = load_seed_wishlists(str(path))
    assert wishlist.wishlist_id == "w1"
    assert wishlist.products == []


def test_load_fixtures_bad_file(tmp_path):
    with pytest.raises(FixtureLoadError):
        load_seed_wishlists(str(tmp_path / "missing.json"))

    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(FixtureLoadError):
        load_seed_wishlists(str(path))

    path.write_text(json.dumps([{"lastSeenAt": "2025-12-01T00:00:00Z"}]))
    with pytest.raises(FixtureLoadError):
        load_seed_wishlists(str(path))
