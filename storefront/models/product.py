# storefront/models/product.py
from datetime import datetime
from decimal import Decimal
from typing import Literal

from sqlmodel import SQLModel, Field

# Closed set of furniture categories. Enforced only by request schemas.
Category = Literal["living room", "bedroom", "dining", "office"]

CATEGORIES: tuple[str, ...] = ("living room", "bedroom", "dining", "office")


class Product(SQLModel):
    """
    Catalog entry mirrored from the `products` table.

    Columns:
      - id, name, description, price, category, image_url,
        created_at, user_id
    """

    id: str
    name: str
    description: str | None = None
    price: Decimal = Field(ge=0, description="Unit price")
    category: str
    image_url: str | None = Field(
        default=None,
        description="Public URL in the products bucket",
    )
    created_at: datetime | None = None
    user_id: str | None = Field(
        default=None,
        description="Admin who created the product",
    )


class ProductSnapshot(SQLModel):
    """
    Product columns joined onto a cart line at read time.
    """

    name: str
    price: Decimal = Field(ge=0)
    image_url: str | None = None
