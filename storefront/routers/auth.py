# storefront/routers/auth.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from storefront.core.auth import HOME_PATH, get_visitor
from storefront.schemas.auth import AuthPage, Credentials
from storefront.state.visitor import Visitor

router = APIRouter(tags=["Auth"])


@router.get("/login", response_model=AuthPage, name="login_page")
def login_page(visitor: Visitor = Depends(get_visitor)):
    """Login screen. Also where guests land when a page needs a session."""
    return AuthPage(
        mode="login",
        user=visitor.auth.user,
        notifications=visitor.notifier.drain(),
    )


@router.post("/login")
def login(payload: Credentials, visitor: Visitor = Depends(get_visitor)):
    """
    Sign in with email/password, then go to the home screen.

    The signed-in user is picked up from the Supabase auth event.
    """
    visitor.auth.sign_in(payload.email, payload.password)
    return RedirectResponse(HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/signup", response_model=AuthPage)
def signup_page(visitor: Visitor = Depends(get_visitor)):
    return AuthPage(
        mode="signup",
        user=visitor.auth.user,
        notifications=visitor.notifier.drain(),
    )


@router.post("/signup")
def signup(payload: Credentials, visitor: Visitor = Depends(get_visitor)):
    """
    Create an account, then go to the home screen.

    Whether the visitor is signed in right away depends on the Supabase
    project's email confirmation setting.
    """
    visitor.auth.sign_up(payload.email, payload.password)
    return RedirectResponse(HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/logout")
def logout(visitor: Visitor = Depends(get_visitor)):
    """Sign out and go back to the home screen."""
    visitor.auth.sign_out()
    return RedirectResponse(HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)
