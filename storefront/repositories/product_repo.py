# storefront/repositories/product_repo.py
from typing import Any

from supabase import Client

from storefront.models.product import Product

TABLE = "products"


class ProductRepository:
    """
    Data access layer for the `products` table.

    - Pure Supabase calls (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def list(
        self,
        client: Client,
        category: str | None = None,
        newest_first: bool = False,
    ) -> list[Product]:
        query = client.table(TABLE).select("*")
        if category is not None:
            query = query.eq("category", category)
        if newest_first:
            query = query.order("created_at", desc=True)
        resp = query.execute()
        return [Product.model_validate(row) for row in resp.data or []]

    def create(self, client: Client, values: dict[str, Any]) -> Product:
        resp = client.table(TABLE).insert(values).execute()
        return Product.model_validate(resp.data[0])

    def delete(self, client: Client, product_id: str) -> None:
        client.table(TABLE).delete().eq("id", product_id).execute()
