# storefront/services/profile_service.py
import logging

from supabase import Client

from storefront.core.errors import REMOTE_ERRORS
from storefront.core.notify import Notifier
from storefront.models.profile import Profile
from storefront.models.user import StorefrontUser
from storefront.repositories.profile_repo import ProfileRepository
from storefront.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Business logic for the customer profile.

    Responsibilities:
      - load the single row for the user (empty defaults if none yet)
      - upsert keyed on user_id, so repeated saves keep one row
    """

    def __init__(self, repo: ProfileRepository):
        self.repo = repo

    def get_profile(self, client: Client, user: StorefrontUser) -> Profile:
        """
        Return the user's profile, or an empty one.

        Load failures are only logged: the form then starts empty.
        """
        try:
            profile = self.repo.get_for_user(client, user.id)
        except REMOTE_ERRORS as e:
            logger.error(f"Error loading profile: {e}")
            profile = None
        return profile or Profile(user_id=user.id)

    def save_profile(
        self,
        client: Client,
        notifier: Notifier,
        user: StorefrontUser,
        payload: ProfileUpdate,
    ) -> Profile:
        try:
            profile = self.repo.upsert(client, user.id, payload.model_dump())
        except REMOTE_ERRORS as e:
            logger.error(f"Error updating profile: {e}")
            raise notifier.fail("Error updating profile")

        notifier.success("Profile updated successfully")
        return profile
