from __future__ import annotations

import os

from storefront_lite.domain.product import DEFAULT_PAGE_SIZE

DEFAULT_HTTP_TIMEOUT_SECONDS = 15.0
DEFAULT_MAX_SHOPPER_SESSIONS = 1000


def catalog_api_url() -> str | None:
    url = os.getenv("CATALOG_API_URL")
    return url.rstrip("/") if url else None


def enquiry_api_url() -> str | None:
    url = os.getenv("ENQUIRY_API_URL")
    return url.rstrip("/") if url else None


def http_timeout_seconds() -> float:
    raw = os.getenv("HTTP_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("HTTP_TIMEOUT_SECONDS must be > 0")

    return timeout


def products_page_size() -> int:
    raw = os.getenv("PRODUCTS_PAGE_SIZE")
    if not raw:
        return DEFAULT_PAGE_SIZE

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"PRODUCTS_PAGE_SIZE must be an integer, got {raw!r}")


def page_policy_name() -> str:
    return os.getenv("PAGE_POLICY", "preserve").strip().lower()


def max_shopper_sessions() -> int:
    raw = os.getenv("MAX_SHOPPER_SESSIONS")
    if not raw:
        return DEFAULT_MAX_SHOPPER_SESSIONS

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"MAX_SHOPPER_SESSIONS must be an integer, got {raw!r}")

    if value < 1:
        raise RuntimeError("MAX_SHOPPER_SESSIONS must be >= 1")

    return value
