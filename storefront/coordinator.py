from typing import List, Optional

from .api_client import RequestError, StoreApiClient, api_client
from .logger import get_logger
from .models import Category, Product
from .observable import Writable
from .stores import ProductCache, product_cache

logger = get_logger(__name__)

IDLE = "idle"
LOADING = "loading"
READY = "ready"
ERRORED = "errored"


class ProductListView:
    """
    Observable state behind a paginated product listing.

    status moves idle -> loading -> ready | errored, and any state may go
    back to loading on the next load_products(). Requests are not
    cancelled: if two loads overlap, whichever finishes last wins.
    """
    def __init__(
        self,
        client: Optional[StoreApiClient] = None,
        items_per_page: int = 6,
        cache: Optional[ProductCache] = None,
    ):
        self.client = client or api_client
        self.items_per_page = items_per_page
        self.cache = cache if cache is not None else product_cache

        self.products: Writable[List[Product]] = Writable([])
        self.categories: Writable[List[Category]] = Writable([])
        self.loading: Writable[bool] = Writable(False)
        self.error: Writable[Optional[str]] = Writable(None)
        self.current_page: Writable[int] = Writable(1)
        self.total_pages: Writable[int] = Writable(1)
        self.status: Writable[str] = Writable(IDLE)

    def load_products(self, page: int = 1) -> None:
        self.loading.set(True)
        self.error.set(None)
        self.status.set(LOADING)

        try:
            result = self.client.get_products(self.items_per_page, page)
        except RequestError as exc:
            logger.warning("Loading page %s failed: %s", page, exc.message)
            self.error.set(exc.message or "Failed to load products")
            self.status.set(ERRORED)
        else:
            self.products.set(result.items)
            self.total_pages.set(result.total_pages)
            self.current_page.set(page)
            self.cache.set(result.items)
            self.status.set(READY)
        finally:
            self.loading.set(False)

    def load_categories(self) -> None:
        try:
            cats = self.client.fetch_categories()
        except RequestError as exc:
            logger.warning("Loading categories failed: %s", exc.message)
            self.error.set(exc.message or "Failed to load categories")
            return
        self.categories.set(cats)

    def initialize(self) -> None:
        if self.cache.has():
            self.products.set(self.cache.get())
            self.loading.set(False)
            self.status.set(READY)
        else:
            self.load_products(1)
        self.load_categories()
