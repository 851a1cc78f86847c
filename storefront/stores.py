"""
Stores shared across views for the lifetime of the process.

products_store holds the last page of products any view loaded, which lets
a later view start without refetching (see ProductCache).
"""
from typing import List, Optional

from .models import Product
from .observable import Writable

ALL_CATEGORIES = "all"

products_store: Writable[List[Product]] = Writable([])


def category_filter(selected: str) -> Optional[str]:
    """Map the selected category to a filter value; "all" means no filter."""
    if not selected or selected == ALL_CATEGORIES:
        return None
    return selected


class ProductCache:
    def __init__(self, store: Optional[Writable[List[Product]]] = None):
        self.store = store if store is not None else Writable([])

    def has(self) -> bool:
        return bool(self.store.get())

    def get(self) -> List[Product]:
        return list(self.store.get())

    def set(self, items: List[Product]) -> None:
        self.store.set(list(items))


product_cache = ProductCache(products_store)
