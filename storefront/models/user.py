# storefront/models/user.py
from typing import Any, Literal

from sqlmodel import SQLModel, Field

# App-level roles. "guest" = no session, so it is not a role here.
Role = Literal["user", "admin"]


class StorefrontUser(SQLModel):
    """
    Read-only view of the Supabase auth user for the current visitor.

    Identity:
      - id: Supabase auth.users.id

    Role:
      - taken from the `role` claim in the user's app_metadata, which only
        the Supabase service role can write
      - defaults to "user" when the claim is missing

    Passwords and tokens stay inside the Supabase client.
    """

    id: str
    email: str | None = None
    role: Role = Field(default="user")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @classmethod
    def from_auth_user(cls, auth_user: Any) -> "StorefrontUser":
        """Build from the user object returned by `client.auth`."""
        app_metadata = getattr(auth_user, "app_metadata", None) or {}
        role = "admin" if app_metadata.get("role") == "admin" else "user"
        return cls(id=str(auth_user.id), email=auth_user.email, role=role)
