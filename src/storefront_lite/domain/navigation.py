"""Shopper-facing paths linked from the product list."""

from __future__ import annotations


def product_path(product_id: str) -> str:
    return f"/user/product/{product_id}"


def query_path(receipt_id: str) -> str:
    return f"/user/query/{receipt_id}"
