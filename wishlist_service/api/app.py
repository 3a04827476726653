"""FastAPI application for the wishlist updates mock."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wishlist_service.api.models import NotFoundResponse
from wishlist_service.api.routes import wishlist
from wishlist_service.config import settings
from wishlist_service.storage.wishlist_store import WishlistNotFoundError, get_wishlist_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_wishlist_store()
    logger.info(f"Mock WishlistService running on port {settings.PORT}")
    logger.info(f"Serving {len(store)} wishlists: {', '.join(store.ids())}")
    yield


# Create FastAPI app
app = FastAPI(
    title="Wishlist Updates Mock API",
    description="Mock wishlist service reporting product sale/stock changes",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WishlistNotFoundError)
async def wishlist_not_found_handler(request: Request, exc: WishlistNotFoundError):
    """Map unknown wishlist id to structured 404."""
    logger.info(f"{request.method} {request.url.path}: wishlist {exc.wishlist_id} not found")
    body = NotFoundResponse(wishlist_id=exc.wishlist_id)
    return JSONResponse(status_code=404, content=body.model_dump(by_alias=True))


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "service": "wishlist-updates-mock"}


app.include_router(wishlist.router)
