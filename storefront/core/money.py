# storefront/core/money.py
from decimal import Decimal
from typing import Iterable

from storefront.models.cart import CartItem

CENTS = Decimal("0.01")


def line_total(item: CartItem) -> Decimal:
    return (item.product.price * item.quantity).quantize(CENTS)


def cart_total(items: Iterable[CartItem]) -> Decimal:
    """
    Sum of price * quantity over the given lines.

    Always recomputed from the lines passed in; nothing is cached.
    """
    total = sum((item.product.price * item.quantity for item in items), Decimal("0"))
    return total.quantize(CENTS)
