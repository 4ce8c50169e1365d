# storefront/schemas/cart.py
from decimal import Decimal

from sqlmodel import SQLModel, Field

from storefront.models.cart import CartItem
from storefront.schemas.page import PageView


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart (always one unit, one new line).
    """

    product_id: str = Field(min_length=1)


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart line.
    """

    quantity: int = Field(gt=0)


class CartLineRead(CartItem):
    """
    Cart line with its line_total.
    """

    line_total: Decimal


class CartSummary(SQLModel):
    """
    Order summary panel. Shipping is always free.
    """

    subtotal: Decimal
    shipping: str = "Free"
    total: Decimal


class CartPage(PageView):
    """
    Cart screen.

    When the cart is empty only `empty_message` and the
    continue-shopping link are meaningful.
    """

    is_empty: bool
    empty_message: str | None = None
    continue_shopping_url: str
    items: list[CartLineRead] = []
    summary: CartSummary | None = None
    payment_qr_url: str | None = None
    payment_caption: str | None = None
