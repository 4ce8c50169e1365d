# storefront/schemas/auth.py
from typing import Literal

from pydantic import EmailStr, ConfigDict
from sqlmodel import SQLModel, Field

from storefront.models.user import StorefrontUser
from storefront.schemas.page import PageView


class Credentials(SQLModel):
    """
    Email/password payload for sign in and sign up.
    Password rules (length etc.) are enforced by Supabase Auth.
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=1)


class AuthPage(PageView):
    """Login / sign-up screen."""

    mode: Literal["login", "signup"]
    user: StorefrontUser | None = None
