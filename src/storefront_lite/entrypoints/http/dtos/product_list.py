from pydantic import BaseModel, ConfigDict, Field

from storefront_lite.entrypoints.http.dtos.enquiry import EnquiryDraftResponseDTO


class InventoryResponseDTO(BaseModel):
    quantity: int
    in_stock: bool


class ProductResponseDTO(BaseModel):
    id: str
    name: str
    description: str
    price: str
    category: str
    type: str | None
    manufacturer: str
    product_img: str
    inventory: InventoryResponseDTO
    detail_path: str


class ProductsQueryDTO(BaseModel):
    """Filter selectors for the product list."""

    category: str = Field(
        default="All",
        description='Category label, or "All" for every category',
        examples=["Tools"],
    )
    type: str | None = Field(
        default=None,
        description="Product type label; omit to leave type unfiltered",
        examples=["Hand"],
    )


class ProductListResponseDTO(BaseModel):
    products: list[ProductResponseDTO]
    category: str
    type: str | None
    page: int
    page_size: int
    total: int
    last_page: int
    can_go_prev: bool
    can_go_next: bool
    enquiry: EnquiryDraftResponseDTO


class PageRequestDTO(BaseModel):
    """Requested page; out-of-range pages are rejected without changing state."""

    page: int = Field(description="1-based page index", examples=[2])

    model_config = ConfigDict(json_schema_extra={"example": {"page": 2}})


class PageChangeResponseDTO(BaseModel):
    accepted: bool
    screen: ProductListResponseDTO


class CatalogLoadResponseDTO(BaseModel):
    loaded: bool = Field(description="False when the catalog could not be refreshed")
    total: int = Field(description="Products currently held after the load attempt")
