# storefront/core/auth.py
from fastapi import Depends, HTTPException, Request, status

from storefront.core.config import get_settings
from storefront.models.user import StorefrontUser
from storefront.state.visitor import Visitor

settings = get_settings()

LOGIN_PATH = f"{settings.API_V1_STR}/login"
HOME_PATH = f"{settings.API_V1_STR}/home"


def get_visitor(request: Request) -> Visitor:
    """
    Return the Visitor resolved by the session middleware in `main.py`.
    """
    return request.state.visitor


def get_current_user(visitor: Visitor = Depends(get_visitor)) -> StorefrontUser | None:
    """
    Current signed-in user, or None for guests.
    """
    return visitor.auth.user


def require_session(
    user: StorefrontUser | None = Depends(get_current_user),
) -> StorefrontUser:
    """
    Pages that need a signed-in user send guests to the login screen
    instead of failing.

    Raises:
        HTTPException(303): redirect to the login route.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Authentication required",
            headers={"Location": LOGIN_PATH},
        )
    return user


def require_admin(user: StorefrontUser = Depends(require_session)) -> StorefrontUser:
    """
    Enforce the admin role.

    This is the only place the admin capability is checked; it relies on
    the `role` claim, never on the email address.

    Raises:
        HTTPException(403): if role is not admin.
    """
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user
