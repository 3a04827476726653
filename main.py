"""Main entry point - Wishlist Updates Mock Service."""

import logging
import uvicorn

from wishlist_service.config import settings

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def main():
    """Run the HTTP server."""
    logger.info(f"Starting Wishlist Updates Mock ({settings.ENVIRONMENT})")
    uvicorn.run(
        "wishlist_service.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
