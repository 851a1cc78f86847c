import locale
import unicodedata
from typing import Iterable, List, Literal, Optional, Tuple

from .models import Product

SortBy = Literal["price-asc", "price-desc", "name", "rating"]


def filter_products(
    items: Iterable[Product],
    search_term: str,
    category: Optional[str] = None,
) -> List[Product]:
    term = (search_term or "").lower()

    out = [p for p in items if term in p.title.lower()]

    if category:
        out = [p for p in out if p.category == category]

    return out


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _name_key(p: Product) -> Tuple[str, str]:
    # accents only break ties, so "Éclair" sorts with "e" even in the C locale
    return (locale.strxfrm(_fold(p.title)), locale.strxfrm(p.title.casefold()))


def sort_products(items: Iterable[Product], sort_by: SortBy = "name") -> List[Product]:
    """Return a sorted copy; unknown keys sort by name."""
    if sort_by == "price-asc":
        return sorted(items, key=lambda p: p.price)
    if sort_by == "price-desc":
        return sorted(items, key=lambda p: p.price, reverse=True)
    if sort_by == "rating":
        return sorted(items, key=lambda p: p.rating.rate, reverse=True)
    return sorted(items, key=_name_key)
