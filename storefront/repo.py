import math
from typing import Optional, Sequence, TYPE_CHECKING

from .filters import SortBy, filter_products, sort_products
from .models import PageResult, Product

if TYPE_CHECKING:
    from .api_client import StoreApiClient


def paginate(all_items: Sequence[Product], page_size: int, page: int) -> PageResult:
    """
    Slice one page out of a fully fetched list.

    - page is echoed back as-is, a page past the end yields no items
    - page_size must be >= 1
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    offset = (page - 1) * page_size
    items = list(all_items[offset:offset + page_size]) if offset >= 0 else []
    total = len(all_items)

    return PageResult(
        items=items,
        total_pages=max(1, math.ceil(total / page_size)),
        current_page=page,
        total_items=total,
    )


def list_products(
    client: "StoreApiClient",
    search: str = "",
    category: Optional[str] = None,
    sort_by: SortBy = "name",
    page: int = 1,
    page_size: int = 6,
) -> PageResult:
    """
    Fetch -> filter -> sort -> paginate.

    A category narrows the fetch server-side; the same category is then
    applied locally so the result does not depend on the server's matching.
    """
    if category:
        items = client.fetch_items_by_category(category)
    else:
        items = client.fetch_all_items()

    out = filter_products(items, search, category)
    out = sort_products(out, sort_by)
    return paginate(out, page_size, page)
