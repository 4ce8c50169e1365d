# storefront/state/admin_form.py
from decimal import Decimal

from supabase import Client

from storefront.core.notify import Notifier
from storefront.models.product import Product
from storefront.schemas.admin import AdminFormRead, FormStatus
from storefront.schemas.product import ProductCreate
from storefront.state.image_dropzone import ImageDropzone

DEFAULT_CATEGORY = "living room"


class AdminForm:
    """
    State of the admin "Add New Product" form for one visitor.

    States:
      idle -> submitting -> idle (reset to defaults on success,
                                  values kept on failure)
    """

    def __init__(self, client: Client, notifier: Notifier):
        self.status: FormStatus = "idle"
        self.products: list[Product] = []
        self.dropzone = ImageDropzone(client, notifier, self.set_image_url)
        self.reset()

    def reset(self) -> None:
        self.name = ""
        self.description = ""
        self.price: Decimal | None = None
        self.category = DEFAULT_CATEGORY
        self.image_url = ""

    def set_image_url(self, url: str) -> None:
        self.image_url = url

    def keep_values(self, payload: ProductCreate) -> None:
        self.name = payload.name
        self.description = payload.description
        self.price = payload.price
        self.category = payload.category

    def read(self) -> AdminFormRead:
        return AdminFormRead(
            status=self.status,
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            image_url=self.image_url,
            image_preview=self.dropzone.preview,
            uploading=self.dropzone.uploading,
        )
