# storefront/state/cart_state.py
import logging
from decimal import Decimal

from fastapi import HTTPException, status
from supabase import Client

from storefront.core.errors import REMOTE_ERRORS
from storefront.core.notify import Notifier
from storefront.models.cart import CartItem
from storefront.models.user import StorefrontUser
from storefront.repositories.cart_repo import CartRepository
from storefront.core.money import cart_total
from storefront.state.auth_state import AuthState

logger = logging.getLogger(__name__)


class CartState:
    """
    The visitor's cart lines, kept in sync with `cart_items`.

    Rules:
      - the whole cart is reloaded whenever the signed-in user changes;
        "no user" empties it without touching storage
      - lines belong to one user: switching users empties the cart
        first, so a failed reload never shows the previous user's lines
      - local state changes only after Supabase confirms a mutation
      - adding always creates a new line, even for a product already in
        the cart
      - `total` is derived from the current lines on every read
    """

    def __init__(
        self,
        client: Client,
        auth: AuthState,
        notifier: Notifier,
        repo: CartRepository | None = None,
    ):
        self.client = client
        self.auth = auth
        self.notifier = notifier
        self.repo = repo or CartRepository()
        self.items: list[CartItem] = []
        self._user_id: str | None = None
        self.loading = True

        self._load(auth.user)
        self._unsubscribe = auth.subscribe(self._load)

    def close(self) -> None:
        self._unsubscribe()

    @property
    def total(self) -> Decimal:
        return cart_total(self.items)

    # ---- internal helpers ----

    def _load(self, user: StorefrontUser | None) -> None:
        user_id = user.id if user is not None else None
        if user_id != self._user_id:
            # Another user's lines must never survive a failed reload.
            self.items = []
        self._user_id = user_id

        if user is None:
            self.loading = False
            return

        self.loading = True
        try:
            self.items = self.repo.list_for_user(self.client, user.id)
        except REMOTE_ERRORS as e:
            logger.error(f"Error loading cart: {e}")
            self.notifier.error("Error loading cart")
        finally:
            self.loading = False

    def _get_item(self, cart_item_id: str) -> CartItem:
        for item in self.items:
            if item.id == cart_item_id:
                return item
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not in cart",
        )

    # ---- public operations ----

    def add_to_cart(self, product_id: str) -> CartItem:
        """
        Insert a new line for the current user, read it back with the
        product snapshot and append it.
        """
        user = self.auth.user
        if user is None:
            raise self.notifier.fail(
                "Please log in to add items to cart",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        try:
            item_id = self.repo.create(self.client, user_id=user.id, product_id=product_id)
            # If this read fails the row exists remotely but not locally
            # until the next reload.
            item = self.repo.get_by_id(self.client, item_id)
        except REMOTE_ERRORS as e:
            logger.error(f"Error adding to cart: {e}")
            raise self.notifier.fail("Error adding to cart")

        self.items = [*self.items, item]
        self.notifier.success("Added to cart")
        return item

    def remove_from_cart(self, cart_item_id: str) -> None:
        self._get_item(cart_item_id)
        try:
            self.repo.delete(self.client, cart_item_id)
        except REMOTE_ERRORS as e:
            logger.error(f"Error removing from cart: {e}")
            raise self.notifier.fail("Error removing from cart")

        self.items = [it for it in self.items if it.id != cart_item_id]
        self.notifier.success("Removed from cart")

    def update_quantity(self, cart_item_id: str, quantity: int) -> CartItem:
        """
        Persist a new quantity for a line. Callers clamp to >= 1.
        """
        item = self._get_item(cart_item_id)
        try:
            self.repo.update_quantity(self.client, cart_item_id, quantity)
        except REMOTE_ERRORS as e:
            logger.error(f"Error updating quantity: {e}")
            raise self.notifier.fail("Error updating quantity")

        updated = item.model_copy(update={"quantity": quantity})
        self.items = [updated if it.id == cart_item_id else it for it in self.items]
        return updated

    def increment(self, cart_item_id: str) -> CartItem:
        item = self._get_item(cart_item_id)
        return self.update_quantity(cart_item_id, item.quantity + 1)

    def decrement(self, cart_item_id: str) -> CartItem:
        item = self._get_item(cart_item_id)
        return self.update_quantity(cart_item_id, max(1, item.quantity - 1))
