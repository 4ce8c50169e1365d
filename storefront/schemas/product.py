# storefront/schemas/product.py
from decimal import Decimal
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from storefront.models.product import Category, Product
from storefront.schemas.page import PageView

CategoryFilter = Literal["all", "living room", "bedroom", "dining", "office"]


class ProductCreate(SQLModel):
    """
    Payload of the admin "Add New Product" form.

    The image URL is not part of the payload: it comes from the
    upload widget's state.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    description: str
    price: Decimal = Field(ge=0)
    category: Category = "living room"

    @field_validator("name", "description")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class HomePage(PageView):
    """
    Browse screen: category pills plus the matching products.
    """

    categories: list[str]
    selected_category: CategoryFilter
    products: list[Product]
