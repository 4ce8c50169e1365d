# storefront/services/cart_service.py
from typing import Iterable

from storefront.core.money import cart_total, line_total
from storefront.models.cart import CartItem
from storefront.schemas.cart import CartLineRead, CartSummary


def build_cart_lines(items: Iterable[CartItem]) -> list[CartLineRead]:
    return [
        CartLineRead(**item.model_dump(), line_total=line_total(item))
        for item in items
    ]


def build_cart_summary(items: list[CartItem]) -> CartSummary:
    """
    Order summary panel: subtotal, free shipping, total.
    """
    subtotal = cart_total(items)
    return CartSummary(subtotal=subtotal, total=subtotal)
