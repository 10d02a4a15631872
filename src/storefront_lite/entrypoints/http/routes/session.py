from fastapi import APIRouter, Depends, Response, status

from storefront_lite.entrypoints.http.dependencies import get_current_user_id, get_view_registry
from storefront_lite.entrypoints.http.view_registry import ViewRegistry


router = APIRouter(tags=["Session"])


@router.delete(
    "/session",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Deactivate the product list view",
    description="""
    Drop the shopper's view: loaded catalog, page, enquiry draft, pending
    notifications and cart lines. The next request starts a fresh view that
    has to load the catalog again. Deactivating twice is a no-op.
    """,
)
async def deactivate_view(
    user_id: str = Depends(get_current_user_id),
    registry: ViewRegistry = Depends(get_view_registry),
) -> Response:
    registry.discard(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
