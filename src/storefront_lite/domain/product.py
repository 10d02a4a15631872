from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront_lite.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


ALL_CATEGORIES = "All"
DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True, slots=True)
class Inventory:
    quantity: int = 0
    # Supplied by the catalog independently of quantity; never reconciled here
    in_stock: bool = False


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    category: str
    description: str = ""
    type: str | None = None
    manufacturer: str = ""
    product_img: str = ""
    inventory: Inventory = Inventory()


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """
    Category/type selectors chosen by the shopper.

    An empty type is treated the same as an absent one.
    """

    category: str = ALL_CATEGORIES
    type: str | None = None

    @property
    def has_type(self) -> bool:
        return bool(self.type)

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        if not isinstance(self.category, str):
            raise FilterValidationError("category must be a string")
        if self.type is not None and not isinstance(self.type, str):
            raise FilterValidationError("type must be a string or None")

    def matches(self, product: Product) -> bool:
        if self.category != ALL_CATEGORIES and product.category != self.category:
            return False
        if self.has_type and product.type != self.type:
            return False
        return True


@dataclass(frozen=True, slots=True)
class PageState:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Visible slice of the filtered catalog plus navigation predicates."""

    products: tuple[Product, ...]
    page: int
    page_size: int
    total_count: int
    last_page: int
    can_go_prev: bool
    can_go_next: bool
