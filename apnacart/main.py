# apnacart/main.py
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
import uvicorn

from apnacart.api import register_routers
from apnacart.data.database import Base, engine
from apnacart.services.cart_registry import CartRegistry
from apnacart.utils.settings import CART_TTL_SECONDS, IMAGES_DIR
from apnacart.utils.logging import get_logger

# import all models before create_all
from apnacart.data.models import VegetableModel  # noqa: F401

logger = get_logger(__name__)


def init_db() -> None:
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise


def create_app() -> FastAPI:
    init_db()

    app = FastAPI(
        title="ApnaCart",
        version="1.0.0",
    )

    # carts live as long as the app object
    app.state.cart_registry = CartRegistry(ttl_seconds=CART_TTL_SECONDS)

    register_routers(app)

    if os.path.isdir(IMAGES_DIR):
        app.mount("/images", StaticFiles(directory=IMAGES_DIR), name="images")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
