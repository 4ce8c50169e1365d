# storefront/repositories/profile_repo.py
from typing import Any

from supabase import Client

from storefront.models.profile import Profile

TABLE = "profiles"


class ProfileRepository:
    """
    Data access layer for `profiles`.

    Responsibilities:
      - Pure Supabase calls, always scoped by user_id
      - No FastAPI, no HTTP, no business logic
    """

    def get_for_user(self, client: Client, user_id: str) -> Profile | None:
        """Return the user's profile row, or None if it does not exist yet."""
        resp = (
            client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .maybe_single()
            .execute()
        )
        # Depending on the client version, "no row" is None or empty data.
        if resp is None or not resp.data:
            return None
        return Profile.model_validate(resp.data)

    def upsert(self, client: Client, user_id: str, values: dict[str, Any]) -> Profile:
        """Insert or update the single profile row keyed on user_id."""
        resp = (
            client.table(TABLE)
            .upsert({**values, "user_id": user_id}, on_conflict="user_id")
            .execute()
        )
        return Profile.model_validate(resp.data[0])
