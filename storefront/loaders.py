"""
Page loaders: fetch what a page needs and describe it for the page head.

Loaders talk to the client directly and do not catch RequestError; a failed
fetch fails the page.
"""
from typing import Optional

from .api_client import StoreApiClient, api_client
from .models import PageData, PageMeta

SITE_NAME = "Fake Store"


def load_home() -> PageData:
    return PageData(
        meta=PageMeta(
            title="FakeStore Dashboard | Products",
            description="Browse and discover products from FakeStore API.",
            keywords="ecommerce, fake store, products",
        ),
    )


def load_product(product_id: int, client: Optional[StoreApiClient] = None) -> PageData:
    product = (client or api_client).fetch_item_by_id(int(product_id))
    return PageData(
        data=product,
        meta=PageMeta(
            title=f"{product.title} | {SITE_NAME}",
            description=product.description,
            image=product.image,
            keywords=f"{product.category}, {product.title}, {SITE_NAME}",
        ),
    )


def load_category(name: str, client: Optional[StoreApiClient] = None) -> PageData:
    items = (client or api_client).fetch_items_by_category(name)
    return PageData(
        data={"items": items, "name": name},
        meta=PageMeta(
            title=f"{name} | {SITE_NAME}",
            description=f"Browse {len(items)} products in {name}.",
            image=items[0].image if items else None,
            keywords=f"{name}, {SITE_NAME}",
        ),
    )
