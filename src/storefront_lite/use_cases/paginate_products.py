from __future__ import annotations

import math
from collections.abc import Sequence

from storefront_lite.domain.product import DEFAULT_PAGE_SIZE, PageWindow, Product


def last_page(total_count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Highest navigable page; an empty result still has page 1."""
    return max(1, math.ceil(total_count / page_size))


def is_valid_page(page: int, total_count: int, page_size: int = DEFAULT_PAGE_SIZE) -> bool:
    return 1 <= page <= last_page(total_count, page_size)


def paginate(
    products: Sequence[Product],
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageWindow:
    """
    Window the filtered products.

    The slice is [(page-1)*page_size, page*page_size) clipped to the collection,
    so an out-of-range page yields an empty window rather than an error.

    Args:
        products: Filtered products, in display order
        page: 1-based page index
        page_size: Products per page (> 0)

    Returns:
        PageWindow with the visible products and navigation predicates
    """
    total_count = len(products)
    start = (page - 1) * page_size
    end = page * page_size

    visible = tuple(products[max(start, 0) : end]) if end > 0 else ()

    return PageWindow(
        products=visible,
        page=page,
        page_size=page_size,
        total_count=total_count,
        last_page=last_page(total_count, page_size),
        can_go_prev=page > 1,
        can_go_next=end < total_count,
    )
