# storefront/services/admin_service.py
import logging

from fastapi import HTTPException, status
from supabase import Client

from storefront.core.errors import REMOTE_ERRORS
from storefront.core.notify import Notifier
from storefront.core.storage_utils import delete_from_storage, object_path_from_public_url
from storefront.models.product import Product
from storefront.models.user import StorefrontUser
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductCreate
from storefront.state.admin_form import AdminForm

logger = logging.getLogger(__name__)


class AdminService:
    """
    Admin product management.

    Responsibilities:
      - product list (newest first)
      - create from the form, requiring an uploaded image
      - delete, with best-effort Storage cleanup of the product image
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def load_products(self, client: Client, form: AdminForm, notifier: Notifier) -> list[Product]:
        """
        Reload the product list into the form state.
        On failure the previous list is kept.
        """
        try:
            form.products = self.repo.list(client, newest_first=True)
        except REMOTE_ERRORS as e:
            logger.error(f"Error loading products: {e}")
            notifier.error("Error loading products")
        return form.products

    def create_product(
        self,
        client: Client,
        form: AdminForm,
        notifier: Notifier,
        user: StorefrontUser,
        payload: ProductCreate,
    ) -> Product:
        """
        Submit the form.

        Rules:
          - rejected without a network call if no image was uploaded
          - success resets the form and reloads the list
          - failure keeps the submitted values in the form
        """
        form.keep_values(payload)

        if not form.image_url:
            raise notifier.fail(
                "Please upload an image",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        form.status = "submitting"
        try:
            values = payload.model_dump(mode="json")
            values["image_url"] = form.image_url
            values["user_id"] = user.id
            product = self.repo.create(client, values)
        except REMOTE_ERRORS as e:
            logger.error(f"Error adding product: {e}")
            raise notifier.fail("Error adding product")
        finally:
            form.status = "idle"

        notifier.success("Product added successfully")
        form.reset()
        form.dropzone.preview = None
        self.load_products(client, form, notifier)
        return product

    def delete_product(
        self,
        client: Client,
        form: AdminForm,
        notifier: Notifier,
        product_id: str,
    ) -> None:
        """
        Delete a product row, then its image (best-effort).

        The image cleanup result never changes the outcome: the deletion
        is reported as successful once the row is gone.
        """
        product = next((p for p in form.products if p.id == product_id), None)
        if product is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        try:
            self.repo.delete(client, product_id)
        except REMOTE_ERRORS as e:
            logger.error(f"Error deleting product {product_id}: {e}")
            raise notifier.fail("Error deleting product")

        if product.image_url:
            path = object_path_from_public_url(product.image_url)
            if path:
                try:
                    delete_from_storage(client, path)
                except REMOTE_ERRORS as e:
                    logger.warning(f"Could not delete image {path}: {e}")

        notifier.success("Product deleted successfully")
        self.load_products(client, form, notifier)
