# apnacart/api/deps.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from apnacart.data.database import get_db
from apnacart.services.cart_registry import CartRegistry
from apnacart.services.catalog_client import CatalogClient
from apnacart.services.catalog_service import CatalogService
from apnacart.utils.settings import CATALOG_SERVICE_URL


def get_cart_registry(request: Request) -> CartRegistry:
    return request.app.state.cart_registry


def get_catalog(db: Session = Depends(get_db)):
    # remote catalog only when configured
    if CATALOG_SERVICE_URL:
        return CatalogClient()
    return CatalogService(db)
