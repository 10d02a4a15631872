from fastapi import APIRouter, Depends

from storefront_lite.entrypoints.http.dependencies import get_shopper_session
from storefront_lite.entrypoints.http.dtos.cart import AddToCartRequestDTO, CartLineResponseDTO
from storefront_lite.entrypoints.http.dtos.notifications import NotificationsResponseDTO
from storefront_lite.entrypoints.http.dtos.product_list import (
    CatalogLoadResponseDTO,
    PageChangeResponseDTO,
    PageRequestDTO,
    ProductListResponseDTO,
    ProductsQueryDTO,
)
from storefront_lite.entrypoints.http.mappers.cart_mapper import CartMapper, NotificationMapper
from storefront_lite.entrypoints.http.mappers.product_list_mapper import ProductListMapper
from storefront_lite.entrypoints.http.view_registry import ShopperSession


router = APIRouter(tags=["Products"])


@router.post(
    "/catalog/load",
    response_model=CatalogLoadResponseDTO,
    summary="Load the product catalog",
    description="""
    Fetch the catalog once for this view activation.

    A malformed catalog payload or an unreachable catalog service never fails
    the request: `loaded` is false and the previously loaded products are kept.
    """,
)
async def load_catalog(
    session: ShopperSession = Depends(get_shopper_session),
) -> CatalogLoadResponseDTO:
    loaded = await session.view.activate()
    return CatalogLoadResponseDTO(loaded=loaded, total=session.view.catalog_size)


@router.get(
    "/products",
    response_model=ProductListResponseDTO,
    summary="Render the product list",
    description="""
    Apply the category/type selectors and return the current page.

    ## Filters
    - `category=All` matches every category
    - `type` is optional; when present it narrows within the category (or across All)

    ## Pagination
    - Page size is fixed per deployment (default 20)
    - The page index is kept across filter changes unless PAGE_POLICY=reset,
      so a narrower filter can render an empty page

    ## Example
    ```
    GET /v1/products?category=Tools&type=Hand
    ```
    """,
)
async def get_products(
    query: ProductsQueryDTO = Depends(),
    session: ShopperSession = Depends(get_shopper_session),
) -> ProductListResponseDTO:
    """Render endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain filters
    filters = ProductListMapper.to_domain_filters(query)

    # 2. Apply to the view
    screen = session.view.apply_filter(filters)

    # 3. Map to response
    return ProductListMapper.to_response(screen)


@router.post(
    "/products/page",
    response_model=PageChangeResponseDTO,
    summary="Go to a page",
)
async def go_to_page(
    payload: PageRequestDTO,
    session: ShopperSession = Depends(get_shopper_session),
) -> PageChangeResponseDTO:
    accepted = session.view.go_to_page(payload.page)
    return PageChangeResponseDTO(
        accepted=accepted,
        screen=ProductListMapper.to_response(session.view.render()),
    )


@router.post(
    "/products/page/next",
    response_model=PageChangeResponseDTO,
    summary="Go to the next page",
)
async def next_page(
    session: ShopperSession = Depends(get_shopper_session),
) -> PageChangeResponseDTO:
    accepted = session.view.next_page()
    return PageChangeResponseDTO(
        accepted=accepted,
        screen=ProductListMapper.to_response(session.view.render()),
    )


@router.post(
    "/products/page/prev",
    response_model=PageChangeResponseDTO,
    summary="Go to the previous page",
)
async def previous_page(
    session: ShopperSession = Depends(get_shopper_session),
) -> PageChangeResponseDTO:
    accepted = session.view.previous_page()
    return PageChangeResponseDTO(
        accepted=accepted,
        screen=ProductListMapper.to_response(session.view.render()),
    )


@router.post(
    "/cart",
    response_model=CartLineResponseDTO,
    summary="Add one unit of a product to the cart",
    responses={404: {"description": "Product is not in the loaded catalog"}},
)
async def add_to_cart(
    payload: AddToCartRequestDTO,
    session: ShopperSession = Depends(get_shopper_session),
) -> CartLineResponseDTO:
    line = session.view.add_to_cart(payload.product_id)
    return CartMapper.to_line_response(line)


@router.get(
    "/notifications",
    response_model=NotificationsResponseDTO,
    summary="Drain pending notifications",
)
async def drain_notifications(
    session: ShopperSession = Depends(get_shopper_session),
) -> NotificationsResponseDTO:
    return NotificationMapper.to_response(session.notifier.drain())
