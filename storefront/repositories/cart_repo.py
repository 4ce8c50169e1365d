# storefront/repositories/cart_repo.py
from supabase import Client

from storefront.models.cart import CartItem

TABLE = "cart_items"

# Cart line plus the product snapshot, joined through the FK.
CART_ITEM_COLUMNS = (
    "id, user_id, product_id, quantity, "
    "product:products(name, price, image_url)"
)


class CartRepository:

    # Get items for a user
    def list_for_user(self, client: Client, user_id: str) -> list[CartItem]:
        resp = (
            client.table(TABLE)
            .select(CART_ITEM_COLUMNS)
            .eq("user_id", user_id)
            .execute()
        )
        return [CartItem.model_validate(row) for row in resp.data or []]

    def get_by_id(self, client: Client, item_id: str) -> CartItem:
        resp = (
            client.table(TABLE)
            .select(CART_ITEM_COLUMNS)
            .eq("id", item_id)
            .single()
            .execute()
        )
        return CartItem.model_validate(resp.data)

    # CRUD
    def create(
        self,
        client: Client,
        *,
        user_id: str,
        product_id: str,
        quantity: int = 1,
    ) -> str:
        """Insert a line and return its id (the joined read happens separately)."""
        resp = (
            client.table(TABLE)
            .insert({"user_id": user_id, "product_id": product_id, "quantity": quantity})
            .execute()
        )
        return str(resp.data[0]["id"])

    def update_quantity(self, client: Client, item_id: str, quantity: int) -> None:
        client.table(TABLE).update({"quantity": quantity}).eq("id", item_id).execute()

    def delete(self, client: Client, item_id: str) -> None:
        client.table(TABLE).delete().eq("id", item_id).execute()
