"""Wire records for the catalog collaborator.

The catalog service speaks camelCase JSON with a Mongo-style ``_id``. These
records validate that shape and convert it to domain ``Product`` entities.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storefront_lite.domain.errors import CatalogLoadError
from storefront_lite.domain.product import Inventory, Product


class InventoryPayloadDTO(BaseModel):
    quantity: int = Field(default=0, ge=0)
    in_stock: bool = Field(default=False, validation_alias=AliasChoices("inStock", "in_stock"))


class ProductPayloadDTO(BaseModel):
    """Single product record as returned by the catalog collaborator."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(validation_alias=AliasChoices("_id", "id"), min_length=1)
    name: str
    description: str | None = None
    price: Decimal = Field(ge=0)
    category: str
    type: str | None = None
    manufacturer: str | None = None
    product_img: str | None = Field(
        default=None, validation_alias=AliasChoices("productImg", "product_img")
    )
    inventory: InventoryPayloadDTO | None = None


_PRODUCT_LIST = TypeAdapter(list[ProductPayloadDTO])


class CatalogPayloadMapper:
    """Maps raw catalog payloads to domain products."""

    @staticmethod
    def to_domain_products(payload: Any) -> list[Product]:
        """
        Validates a raw catalog payload and converts it to domain products.

        Args:
            payload: Whatever the catalog source returned

        Returns:
            Products in payload order

        Raises:
            CatalogLoadError: If the payload is not a sequence of product records
        """
        if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
            raise CatalogLoadError(
                "Catalog payload is not a sequence",
                payload_type=type(payload).__name__,
            )

        try:
            records = _PRODUCT_LIST.validate_python(list(payload))
        except PydanticValidationError as exc:
            raise CatalogLoadError(
                "Catalog payload contains malformed product records",
                error_count=exc.error_count(),
            ) from exc

        return [CatalogPayloadMapper.to_product(record) for record in records]

    @staticmethod
    def to_product(record: ProductPayloadDTO) -> Product:
        inventory = record.inventory or InventoryPayloadDTO()
        return Product(
            id=record.id,
            name=record.name,
            description=record.description or "",
            price=record.price,
            category=record.category,
            type=record.type or None,
            manufacturer=record.manufacturer or "",
            product_img=record.product_img or "",
            inventory=Inventory(
                quantity=inventory.quantity,
                in_stock=inventory.in_stock,
            ),
        )
