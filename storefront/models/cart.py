# storefront/models/cart.py
from sqlmodel import SQLModel, Field

from storefront.models.product import ProductSnapshot


class CartItem(SQLModel):
    """
    Shopping cart line mirrored from `cart_items`, with the product
    snapshot joined in.

    One row per "add to cart": the same product can appear on
    several lines.
    """

    id: str
    user_id: str | None = None
    product_id: str
    quantity: int = Field(
        ge=1,
        description="Must be >= 1",
    )
    product: ProductSnapshot
