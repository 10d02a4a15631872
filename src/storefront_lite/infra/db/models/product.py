from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront_lite.infra.db.models.base import Base


class ProductRow(Base):
    """Read-only view of the catalog collaborator's products table."""

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    price: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)

    category: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(String(200), nullable=True)
    product_img: Mapped[str | None] = mapped_column(Text, nullable=True)

    inventory_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Listing order; the catalog is rendered in this order
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
