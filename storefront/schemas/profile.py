# storefront/schemas/profile.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from storefront.models.profile import Profile
from storefront.schemas.page import PageView


class ProfileUpdate(SQLModel):
    """
    Profile form payload. All three fields are required.
    """

    model_config = ConfigDict(extra="forbid")

    full_name: str = Field(max_length=200)
    address: str
    phone: str = Field(max_length=50)

    @field_validator("full_name", "address", "phone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class ProfilePage(PageView):
    profile: Profile
