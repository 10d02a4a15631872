from __future__ import annotations

from storefront_lite.domain.navigation import product_path
from storefront_lite.domain.product import CatalogFilters, Product
from storefront_lite.entrypoints.http.dtos.product_list import (
    InventoryResponseDTO,
    ProductListResponseDTO,
    ProductResponseDTO,
    ProductsQueryDTO,
)
from storefront_lite.entrypoints.http.mappers.enquiry_mapper import EnquiryMapper
from storefront_lite.use_cases.product_list_view import ProductListScreen


class ProductListMapper:
    """Maps between REST DTOs and domain models for the product list."""

    @staticmethod
    def to_domain_filters(dto: ProductsQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters.

        An empty type parameter (``?type=``) means no type filter.
        """
        return CatalogFilters(category=dto.category, type=dto.type or None)

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=str(product.price),
            category=product.category,
            type=product.type,
            manufacturer=product.manufacturer,
            product_img=product.product_img,
            inventory=InventoryResponseDTO(
                quantity=product.inventory.quantity,
                in_stock=product.inventory.in_stock,
            ),
            detail_path=product_path(product.id),
        )

    @staticmethod
    def to_response(screen: ProductListScreen) -> ProductListResponseDTO:
        window = screen.window
        return ProductListResponseDTO(
            products=[ProductListMapper.to_product_response(p) for p in window.products],
            category=screen.filters.category,
            type=screen.filters.type,
            page=window.page,
            page_size=window.page_size,
            total=window.total_count,
            last_page=window.last_page,
            can_go_prev=window.can_go_prev,
            can_go_next=window.can_go_next,
            enquiry=EnquiryMapper.to_draft_response(screen.enquiry_state, screen.enquiry_draft),
        )
