import os
from typing import Any, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from .logger import get_logger
from .models import Category, PageResult, Product
from .repo import paginate

logger = get_logger(__name__)

BASE_URL = os.getenv("STORE_API_BASE_URL", "https://fakestoreapi.com").strip()
TIMEOUT = os.getenv("STORE_API_TIMEOUT", "").strip()

_product = TypeAdapter(Product)
_products = TypeAdapter(List[Product])
_categories = TypeAdapter(List[Category])


class RequestError(Exception):
    """Any failed catalog request: bad status, transport failure or bad payload."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class StoreApiClient:
    """
    Read-only client for the catalog API.

    Config:
      - STORE_API_BASE_URL  default https://fakestoreapi.com
      - STORE_API_TIMEOUT   seconds; unset means no timeout
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base = (base_url or BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        if timeout is None and TIMEOUT:
            timeout = float(TIMEOUT)
        self.timeout = timeout

    def _get_json(self, path: str) -> Any:
        url = f"{self.base}{path}"
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as exc:
            response = getattr(exc, "response", None)
            status = response.status_code if response is not None else None
            if status is not None:
                message = f"HTTP error! status: {status}"
            else:
                message = f"Request to {url} failed: {exc}"
            logger.error("API error: %s", message)
            raise RequestError(message, status=status) from exc

    def _decode(self, adapter: TypeAdapter, payload: Any, path: str) -> Any:
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            message = f"Malformed payload from {path}: {exc.error_count()} validation error(s)"
            logger.error("API error: %s", message)
            raise RequestError(message) from exc

    def fetch_all_items(self) -> List[Product]:
        path = "/products"
        return self._decode(_products, self._get_json(path), path)

    def fetch_item_by_id(self, product_id: int) -> Product:
        path = f"/products/{product_id}"
        return self._decode(_product, self._get_json(path), path)

    def fetch_categories(self) -> List[Category]:
        path = "/products/categories"
        return self._decode(_categories, self._get_json(path), path)

    def fetch_items_by_category(self, category: str) -> List[Product]:
        path = f"/products/category/{category}"
        return self._decode(_products, self._get_json(path), path)

    def get_products(self, limit: int = 6, page: int = 1) -> PageResult:
        """The API has no server-side paging: fetch everything and slice."""
        return paginate(self.fetch_all_items(), limit, page)


api_client = StoreApiClient()


def get_products(limit: int = 6, page: int = 1) -> PageResult:
    return api_client.get_products(limit, page)


def get_product_by_id(product_id: int) -> Product:
    return api_client.fetch_item_by_id(product_id)


def get_categories() -> List[Category]:
    return api_client.fetch_categories()


def get_products_by_category(category: str) -> List[Product]:
    return api_client.fetch_items_by_category(category)
