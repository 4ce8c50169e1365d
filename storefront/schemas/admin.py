# storefront/schemas/admin.py
from decimal import Decimal
from typing import Literal

from sqlmodel import SQLModel

from storefront.models.product import Product
from storefront.schemas.page import PageView

FormStatus = Literal["idle", "submitting"]


class AdminFormRead(SQLModel):
    """
    Current state of the "Add New Product" form, including the upload
    widget (preview URL and in-flight flag).
    """

    status: FormStatus
    name: str
    description: str
    price: Decimal | None
    category: str
    image_url: str
    image_preview: str | None
    uploading: bool


class AdminPage(PageView):
    form: AdminFormRead
    categories: list[str]
    products: list[Product]


class ImageUploadRead(PageView):
    """
    Result of an upload or clear. `url` is "" after clearing.
    """

    url: str
