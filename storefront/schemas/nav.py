# storefront/schemas/nav.py
from typing import Literal

from sqlmodel import SQLModel

from storefront.models.user import StorefrontUser


class NavLink(SQLModel):
    label: str
    href: str
    method: Literal["GET", "POST"] = "GET"


class NavShell(SQLModel):
    """
    Top bar: brand, auth-dependent links, cart badge.
    """

    brand: str
    links: list[NavLink]
    cart_count: int
    user: StorefrontUser | None = None
