import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shop.api.v1 import shopping
from shop.application.shopping_service import ShoppingService
from shop.config import get_settings
from shop.infrastructure.database import Database, masked_url
from shop.infrastructure.repositories.sql_inventory_store import SqlInventoryStore
from shop.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager - setup and teardown.
    Connects the database and builds the shopping service on startup.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)

    db = Database(settings.database_url, echo=settings.sql_echo)
    db.create_tables()
    app.state.db = db
    app.state.shopping_service = ShoppingService(SqlInventoryStore(db.session_factory))

    logger.info(f"Database connected: {masked_url(settings.database_url)}")

    yield

    # Shutdown
    db.close()
    logger.info("Database connection closed")


app = FastAPI(
    title="Shop Checkout Service",
    description="Carts and all-or-nothing checkout against product inventory",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(shopping.router)


@app.get("/health")
def health():
    """Health check endpoint"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "shop.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
