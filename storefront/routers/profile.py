# storefront/routers/profile.py
from fastapi import APIRouter, Depends

from storefront.core.auth import get_visitor, require_session
from storefront.models.user import StorefrontUser
from storefront.repositories.profile_repo import ProfileRepository
from storefront.schemas.profile import ProfilePage, ProfileUpdate
from storefront.services.profile_service import ProfileService
from storefront.state.visitor import Visitor

router = APIRouter(prefix="/profile", tags=["Profile"])

repo = ProfileRepository()
service = ProfileService(repo)


@router.get("", response_model=ProfilePage)
def read_profile(
    visitor: Visitor = Depends(get_visitor),
    current_user: StorefrontUser = Depends(require_session),
):
    """
    The signed-in user's profile form.

    Guests are redirected to login. Users without a profile row yet get
    empty fields.
    """
    profile = service.get_profile(visitor.client, current_user)
    return ProfilePage(profile=profile, notifications=visitor.notifier.drain())


@router.put("", response_model=ProfilePage)
def save_profile(
    payload: ProfileUpdate,
    visitor: Visitor = Depends(get_visitor),
    current_user: StorefrontUser = Depends(require_session),
):
    """
    Save the profile (insert or update on user_id).
    """
    profile = service.save_profile(visitor.client, visitor.notifier, current_user, payload)
    return ProfilePage(profile=profile, notifications=visitor.notifier.drain())
