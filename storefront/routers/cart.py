# storefront/routers/cart.py
from fastapi import APIRouter, Depends, status

from storefront.core.auth import HOME_PATH, get_visitor
from storefront.core.config import get_settings
from storefront.schemas.cart import CartItemCreate, CartItemUpdate, CartPage
from storefront.services.cart_service import build_cart_lines, build_cart_summary
from storefront.state.visitor import Visitor

settings = get_settings()

router = APIRouter(prefix="/cart", tags=["Cart"])

PAYMENT_CAPTION = "Scan to pay with any UPI app"


def render_cart(visitor: Visitor) -> CartPage:
    """
    Build the cart screen from the visitor's current cart state.

    Checkout is presentational: a static payment QR image, no order.
    """
    items = visitor.cart.items
    notifications = visitor.notifier.drain()

    if not items:
        return CartPage(
            is_empty=True,
            empty_message="Your cart is empty",
            continue_shopping_url=HOME_PATH,
            notifications=notifications,
        )

    return CartPage(
        is_empty=False,
        continue_shopping_url=HOME_PATH,
        items=build_cart_lines(items),
        summary=build_cart_summary(items),
        payment_qr_url=settings.PAYMENT_QR_URL,
        payment_caption=PAYMENT_CAPTION,
        notifications=notifications,
    )


@router.get("", response_model=CartPage)
def get_my_cart(visitor: Visitor = Depends(get_visitor)):
    """
    Current visitor's cart.

    Guests always see the empty cart.
    """
    return render_cart(visitor)


@router.post("/items", response_model=CartPage, status_code=status.HTTP_201_CREATED)
def add_to_cart(payload: CartItemCreate, visitor: Visitor = Depends(get_visitor)):
    """
    Add one unit of a product as a new cart line.

    Guests get 401 and nothing is written.
    """
    visitor.cart.add_to_cart(payload.product_id)
    return render_cart(visitor)


@router.patch("/items/{item_id}", response_model=CartPage)
def update_cart_item(
    item_id: str,
    payload: CartItemUpdate,
    visitor: Visitor = Depends(get_visitor),
):
    """
    Set the quantity of a cart line (must be >= 1).
    """
    visitor.cart.update_quantity(item_id, payload.quantity)
    return render_cart(visitor)


@router.post("/items/{item_id}/increment", response_model=CartPage)
def increment_cart_item(item_id: str, visitor: Visitor = Depends(get_visitor)):
    """Quantity stepper "+". No upper bound."""
    visitor.cart.increment(item_id)
    return render_cart(visitor)


@router.post("/items/{item_id}/decrement", response_model=CartPage)
def decrement_cart_item(item_id: str, visitor: Visitor = Depends(get_visitor)):
    """Quantity stepper "-". Never goes below 1."""
    visitor.cart.decrement(item_id)
    return render_cart(visitor)


@router.delete("/items/{item_id}", response_model=CartPage)
def remove_cart_item(item_id: str, visitor: Visitor = Depends(get_visitor)):
    """
    Remove a line from the cart. No confirmation step.
    """
    visitor.cart.remove_from_cart(item_id)
    return render_cart(visitor)
