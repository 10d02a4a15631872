from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from storefront_lite.domain.cart import CartLineRequest
from storefront_lite.domain.enquiry import EnquiryDraft, EnquiryReceipt, EnquiryState
from storefront_lite.domain.errors import NotFoundError
from storefront_lite.domain.product import (
    DEFAULT_PAGE_SIZE,
    CatalogFilters,
    PageState,
    PageWindow,
    Product,
)
from storefront_lite.use_cases.add_to_cart import AddProductToCart
from storefront_lite.use_cases.catalog_store import CatalogStore
from storefront_lite.use_cases.enquiry_workflow import EnquiryWorkflow
from storefront_lite.use_cases.filter_products import filter_products
from storefront_lite.use_cases.paginate_products import is_valid_page, last_page, paginate

logger = logging.getLogger(__name__)


class PagePolicy(str, Enum):
    """What happens to the current page when the applied filters change."""

    PRESERVE = "preserve"  # Keep the page index; the window may clip to empty
    RESET = "reset"  # Go back to page 1


@dataclass(frozen=True, slots=True)
class ProductListScreen:
    """Everything the UI needs to draw the product list at one instant."""

    filters: CatalogFilters
    window: PageWindow
    enquiry_state: EnquiryState
    enquiry_draft: EnquiryDraft


class ProductListView:
    """
    Product list screen state.

    Owns the page state and, through the enquiry workflow, the enquiry draft.
    Filters are supplied by the caller; the view only remembers the most
    recently applied ones so navigation can be checked against the same
    filtered set that was rendered.
    """

    def __init__(
        self,
        catalog_store: CatalogStore,
        enquiry_workflow: EnquiryWorkflow,
        add_to_cart: AddProductToCart,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_policy: PagePolicy = PagePolicy.PRESERVE,
    ) -> None:
        page_state = PageState(page=1, page_size=page_size)
        page_state.validate()

        self._catalog = catalog_store
        self._enquiry = enquiry_workflow
        self._add_to_cart = add_to_cart
        self._page_policy = page_policy
        self._page_state = page_state
        self._filters = CatalogFilters()

    @property
    def page_state(self) -> PageState:
        return self._page_state

    @property
    def filters(self) -> CatalogFilters:
        return self._filters

    @property
    def catalog_size(self) -> int:
        return len(self._catalog.products)

    @property
    def enquiry_state(self) -> EnquiryState:
        return self._enquiry.state

    @property
    def enquiry_draft(self) -> EnquiryDraft:
        return self._enquiry.draft

    async def activate(self) -> bool:
        """Load the catalog for this activation. Returns whether it was replaced."""
        return await self._catalog.load()

    # ------------------------------------------------------------------
    # Filtering and paging
    # ------------------------------------------------------------------

    def apply_filter(self, filters: CatalogFilters) -> ProductListScreen:
        filters.validate()

        if filters != self._filters and self._page_policy is PagePolicy.RESET:
            self._page_state = replace(self._page_state, page=1)

        self._filters = filters
        return self.render()

    def filtered_products(self) -> list[Product]:
        return filter_products(self._catalog.products, self._filters)

    def render(self) -> ProductListScreen:
        window = paginate(
            self.filtered_products(),
            page=self._page_state.page,
            page_size=self._page_state.page_size,
        )
        return ProductListScreen(
            filters=self._filters,
            window=window,
            enquiry_state=self._enquiry.state,
            enquiry_draft=self._enquiry.draft,
        )

    def go_to_page(self, page: int) -> bool:
        """
        Move to a page of the current filtered set.

        Returns:
            False, with no state change, if the page is outside 1..last page
        """
        total_count = len(self.filtered_products())
        if not is_valid_page(page, total_count, self._page_state.page_size):
            logger.debug(
                "Rejected page navigation",
                extra={"page": page, "total_count": total_count},
            )
            return False

        self._page_state = replace(self._page_state, page=page)
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self._page_state.page + 1)

    def previous_page(self) -> bool:
        """
        Step back one page.

        A page index left past the end by a narrower filter steps back to the
        last page of the current filtered set instead.
        """
        total_count = len(self.filtered_products())
        target = min(
            self._page_state.page - 1,
            last_page(total_count, self._page_state.page_size),
        )
        return self.go_to_page(target)

    # ------------------------------------------------------------------
    # Enquiry
    # ------------------------------------------------------------------

    def open_enquiry(self, product_id: str) -> EnquiryDraft:
        return self._enquiry.open(self._require_product(product_id))

    def change_enquiry_field(self, field: str, value: str | int | None) -> EnquiryDraft:
        return self._enquiry.change_field(field, value)

    async def submit_enquiry(self) -> EnquiryReceipt | None:
        return await self._enquiry.submit()

    def close_enquiry(self) -> None:
        self._enquiry.close()

    # ------------------------------------------------------------------
    # Cart
    # ------------------------------------------------------------------

    def add_to_cart(self, product_id: str) -> CartLineRequest:
        return self._add_to_cart.execute(self._require_product(product_id))

    def _require_product(self, product_id: str) -> Product:
        product = self._catalog.find(product_id)
        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)
        return product
