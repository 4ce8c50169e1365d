# storefront/models/profile.py
from sqlmodel import SQLModel


class Profile(SQLModel):
    """
    Customer contact details from `profiles`.
    Exactly one row per user, keyed by user_id.
    """

    id: str | None = None
    user_id: str | None = None
    full_name: str = ""
    address: str = ""
    phone: str = ""
