from __future__ import annotations

from collections.abc import Iterable

from storefront_lite.domain.product import CatalogFilters, Product


def filter_products(products: Iterable[Product], filters: CatalogFilters) -> list[Product]:
    """
    Project the catalog onto the shopper's category/type selection.

    | category | type    | keep iff                                    |
    |----------|---------|---------------------------------------------|
    | "All"    | absent  | always                                      |
    | "All"    | present | product.type == type                        |
    | specific | absent  | product.category == category                |
    | specific | present | product.category == category and type match |

    Pure: the source is never mutated and a fresh list is returned in source order.
    """
    return [product for product in products if filters.matches(product)]
