# storefront/routers/nav.py
from fastapi import APIRouter, Depends

from storefront.core.auth import HOME_PATH, get_visitor
from storefront.core.config import get_settings
from storefront.core.notify import Notification
from storefront.schemas.nav import NavLink, NavShell
from storefront.state.visitor import Visitor

settings = get_settings()

router = APIRouter(tags=["Navigation"])

BRAND = "VN Furniture"


@router.get("/nav", response_model=NavShell)
def nav(visitor: Visitor = Depends(get_visitor)):
    """
    Navigation bar for the current visitor.

    - Guests: Home, Login, Sign Up.
    - Signed in: Home, Admin (admins only), Sign Out.
    - The cart badge is a fixed 0; it does not follow the cart.
    """
    api = settings.API_V1_STR
    user = visitor.auth.user
    links = [NavLink(label="Home", href=HOME_PATH)]

    if user is not None:
        if user.is_admin:
            links.append(NavLink(label="Admin", href=f"{api}/admin"))
        links.append(NavLink(label="Sign Out", href=f"{api}/logout", method="POST"))
    else:
        links.append(NavLink(label="Login", href=f"{api}/login"))
        links.append(NavLink(label="Sign Up", href=f"{api}/signup"))

    return NavShell(brand=BRAND, links=links, cart_count=0, user=user)


@router.get("/notifications", response_model=list[Notification])
def notifications(visitor: Visitor = Depends(get_visitor)):
    """Hand over (and forget) the visitor's pending toasts."""
    return visitor.notifier.drain()
