# -*- coding: utf-8 -*-
"""
Browse the product catalog from the command line.

Run (from project root):
  python -m scripts.browse_catalog --page 2 --page-size 6 --sort price-asc
  python -m scripts.browse_catalog --search backpack --category "men's clothing"
  python -m scripts.browse_catalog --categories
  python -m scripts.browse_catalog --product 3
  python -m scripts.browse_catalog --dark-mode toggle

Env:
  STORE_API_BASE_URL   default: https://fakestoreapi.com
  STORE_API_TIMEOUT    optional, seconds
  DATABASE_URL         optional, SQLAlchemy URL for persisted preferences
"""

import argparse
import locale
import sys
from typing import List, Optional

from storefront.api_client import RequestError, StoreApiClient
from storefront.loaders import load_product
from storefront.models import PageResult, Product
from storefront.preferences import DarkModeStore, preference_storage_from_env
from storefront.repo import list_products
from storefront.stores import ALL_CATEGORIES, category_filter

SORT_CHOICES = ["name", "price-asc", "price-desc", "rating"]


# ----------------------------
# formatting
# ----------------------------

def format_product_line(p: Product) -> str:
    return (
        f"#{p.id:<4} {p.title[:48]:<48} ${p.price:>8.2f}  "
        f"{p.rating.rate:.1f}* ({p.rating.count})  [{p.category}]"
    )

def format_page(result: PageResult) -> List[str]:
    lines = [format_product_line(p) for p in result.items]
    if not lines:
        lines.append("(no products)")
    lines.append(
        f"page {result.current_page}/{result.total_pages} "
        f"- {result.total_items} matching products"
    )
    return lines


# ----------------------------
# main
# ----------------------------

def main(argv: Optional[List[str]] = None, client: Optional[StoreApiClient] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--page", type=int, default=1)
    ap.add_argument("--page-size", type=int, default=6)
    ap.add_argument("--search", default="")
    ap.add_argument("--category", default=ALL_CATEGORIES)
    ap.add_argument("--sort", choices=SORT_CHOICES, default="name")
    ap.add_argument("--categories", action="store_true", help="list categories and exit")
    ap.add_argument("--product", type=int, default=None, help="show one product and exit")
    ap.add_argument("--dark-mode", choices=["on", "off", "toggle", "show"], default=None)
    args = ap.parse_args(argv)

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        print("warning: unsupported locale, sorting names in the C locale", file=sys.stderr)

    if args.page_size < 1:
        ap.error("--page-size must be >= 1")

    if args.dark_mode:
        store = DarkModeStore(preference_storage_from_env())
        if args.dark_mode == "toggle":
            store.toggle()
        elif args.dark_mode in ("on", "off"):
            store.set(args.dark_mode == "on")
        print(f"dark mode: {'on' if store.get() else 'off'}")
        return 0

    client = client or StoreApiClient()

    try:
        if args.categories:
            for c in client.fetch_categories():
                print(c)
            return 0

        if args.product is not None:
            page = load_product(args.product, client=client)
            print(format_product_line(page.data))
            print(page.data.description)
            return 0

        result = list_products(
            client,
            search=args.search,
            category=category_filter(args.category),
            sort_by=args.sort,
            page=args.page,
            page_size=args.page_size,
        )
    except RequestError as e:
        print(f"ERROR: {e.message}")
        return 1

    for line in format_page(result):
        print(line)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
