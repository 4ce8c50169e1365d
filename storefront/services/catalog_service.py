# storefront/services/catalog_service.py
import logging

from supabase import Client

from storefront.core.errors import REMOTE_ERRORS
from storefront.core.notify import Notifier
from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class CatalogService:
    """
    Product browsing for the home screen.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(
        self,
        client: Client,
        notifier: Notifier,
        category: str = ALL_CATEGORIES,
    ) -> list[Product]:
        """
        Products in `category`, or every product for "all".
        Queried fresh on every call.
        """
        try:
            return self.repo.list(
                client,
                category=None if category == ALL_CATEGORIES else category,
            )
        except REMOTE_ERRORS as e:
            logger.error(f"Error loading products: {e}")
            raise notifier.fail("Error loading products")
