import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from wishlist_service.api.app import app
from wishlist_service.storage.wishlist_store import WishlistStore, get_wishlist_store


@pytest.fixture
def store() -> WishlistStore:
    """Fresh store seeded from built-in fixtures"""
    return WishlistStore.from_fixtures()


@pytest.fixture
async def client(store: WishlistStore) -> AsyncGenerator:
    """Async HTTP client bound to the app with a per-test store"""
    app.dependency_overrides[get_wishlist_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
