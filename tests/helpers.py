import json
from typing import Any, Optional

import requests

from storefront.models import Product

BASE = "https://fakestoreapi.com"


def product_dict(
    id: int,
    title: Optional[str] = None,
    price: float = 100,
    category: str = "test",
    rate: float = 4,
    count: int = 10,
) -> dict:
    return {
        "id": id,
        "title": title or f"Product {id}",
        "price": price,
        "description": "Test",
        "category": category,
        "image": "test.jpg",
        "rating": {"rate": rate, "count": count},
    }


def make_product(id: int, **kwargs) -> Product:
    return Product.model_validate(product_dict(id, **kwargs))


def make_response(data: Any = None, status: int = 200, body: Optional[bytes] = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.reason = "OK" if status < 400 else "Error"
    r.encoding = "utf-8"
    r.url = BASE
    r._content = body if body is not None else json.dumps(data).encode("utf-8")
    return r
