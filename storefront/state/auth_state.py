# storefront/state/auth_state.py
import logging
from typing import Any, Callable

from fastapi import status
from supabase import Client

from storefront.core.errors import REMOTE_ERRORS
from storefront.core.notify import Notifier
from storefront.models.user import StorefrontUser

logger = logging.getLogger(__name__)

UserListener = Callable[[StorefrontUser | None], None]


class AuthState:
    """
    Observable authentication state for one visitor.

    Wraps the visitor's Supabase auth session:
      - `user` is the signed-in user (or None), `loading` is True until the
        existing session has been read.
      - Supabase auth events (sign in, sign out, token refresh) update
        `user`; listeners registered via `subscribe()` are told whenever the
        user identity changes.
      - sign_in / sign_up never assign `user` themselves, the auth event
        does.

    Nothing else may mutate the visitor's auth session.
    """

    def __init__(self, client: Client, notifier: Notifier):
        self.client = client
        self.notifier = notifier
        self.user: StorefrontUser | None = None
        self.loading = True
        self._listeners: list[UserListener] = []
        self._subscription: Any = None

    # ---- lifecycle ----

    def start(self) -> None:
        """Read any existing session and subscribe to auth changes."""
        try:
            session = self.client.auth.get_session()
        except REMOTE_ERRORS as e:
            logger.error(f"Error reading auth session: {e}")
            session = None
        self._set_user(session.user if session else None)
        self._subscription = self.client.auth.on_auth_state_change(self._on_auth_event)
        self.loading = False

    def close(self) -> None:
        """Stop listening to Supabase and drop all listeners."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._listeners.clear()

    def subscribe(self, listener: UserListener) -> Callable[[], None]:
        """
        Register a listener for user changes.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- internal helpers ----

    def _on_auth_event(self, event: str, session: Any) -> None:
        logger.info(f"Auth event: {event}")
        self._set_user(session.user if session else None)

    def _set_user(self, auth_user: Any) -> None:
        new_user = StorefrontUser.from_auth_user(auth_user) if auth_user else None
        old_id = self.user.id if self.user else None
        new_id = new_user.id if new_user else None
        self.user = new_user
        if old_id != new_id:
            for listener in list(self._listeners):
                listener(new_user)

    # ---- public operations ----

    def sign_in(self, email: str, password: str) -> None:
        try:
            self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except REMOTE_ERRORS as e:
            logger.error(f"Error signing in: {e}")
            raise self.notifier.fail(
                "Invalid email or password",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        self.notifier.success("Signed in successfully")

    def sign_up(self, email: str, password: str) -> None:
        try:
            self.client.auth.sign_up({"email": email, "password": password})
        except REMOTE_ERRORS as e:
            logger.error(f"Error signing up: {e}")
            raise self.notifier.fail(
                "Error creating account",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        self.notifier.success("Account created successfully")

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except REMOTE_ERRORS as e:
            logger.error(f"Error signing out: {e}")
            raise self.notifier.fail("Error signing out")
