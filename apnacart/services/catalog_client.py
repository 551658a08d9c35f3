# apnacart/services/catalog_client.py
from dataclasses import replace
from typing import List

import requests

from apnacart.domain.catalog import CatalogItem
from apnacart.domain.errors import VegetableNotFound
from apnacart.services.image_matcher import normalize_image_path
from apnacart.utils.retry import http_retry
from apnacart.utils.settings import CATALOG_SERVICE_URL
from apnacart.utils.logging import get_logger

logger = get_logger(__name__)


def _to_catalog_item(row) -> CatalogItem:
    item = CatalogItem.from_dict(row)
    return replace(item, image_ref=normalize_image_path(item.image_ref))


class CatalogClient:
    """Catalog read interface backed by another storefront's /api/vegetables."""

    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = (base_url or CATALOG_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    @http_retry()
    def list_catalog_items(self) -> List[CatalogItem]:
        url = f"{self.base_url}/api/vegetables"
        logger.info(f"CatalogClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return [_to_catalog_item(row) for row in resp.json()]

    @http_retry()
    def get_catalog_item(self, vegetable_id: int) -> CatalogItem:
        url = f"{self.base_url}/api/vegetables/{vegetable_id}"
        logger.info(f"CatalogClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        # 404 is an answer, not a transport error: no retry
        if resp.status_code == 404:
            raise VegetableNotFound(vegetable_id)
        resp.raise_for_status()
        return _to_catalog_item(resp.json())
