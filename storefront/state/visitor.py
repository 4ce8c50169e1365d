# storefront/state/visitor.py
import logging
import threading
import uuid
from collections import OrderedDict
from typing import Callable

from supabase import Client

from storefront.core.notify import Notifier
from storefront.state.admin_form import AdminForm
from storefront.state.auth_state import AuthState
from storefront.state.cart_state import CartState

logger = logging.getLogger(__name__)


class Visitor:
    """
    Everything the storefront remembers about one browser.

    - client: the visitor's own Supabase client (holds their auth session)
    - auth / cart: observable state, cart subscribed to auth
    - notifier: pending toasts
    - admin_form: the admin "Add New Product" form
    """

    def __init__(self, visitor_id: str, client: Client):
        self.id = visitor_id
        self.client = client
        self.notifier = Notifier()
        self.auth = AuthState(client, self.notifier)
        self.auth.start()
        self.cart = CartState(client, self.auth, self.notifier)
        self.admin_form = AdminForm(client, self.notifier)

    def close(self) -> None:
        self.cart.close()
        self.auth.close()


class VisitorRegistry:
    """
    In-process map of visitor id -> Visitor, bounded in size.

    Visitors are created lazily on their first request. Once more than
    `max_visitors` exist, the least recently seen one is closed and
    dropped; its browser simply starts over as a new visitor.
    """

    def __init__(self, client_factory: Callable[[], Client], max_visitors: int = 1000):
        self.client_factory = client_factory
        self.max_visitors = max_visitors
        self._visitors: OrderedDict[str, Visitor] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, visitor_id: str | None) -> Visitor | None:
        if visitor_id is None:
            return None
        with self._lock:
            visitor = self._visitors.get(visitor_id)
            if visitor is not None:
                self._visitors.move_to_end(visitor_id)
            return visitor

    def create(self) -> Visitor:
        visitor_id = uuid.uuid4().hex
        visitor = Visitor(visitor_id, self.client_factory())
        evicted: list[Visitor] = []
        with self._lock:
            self._visitors[visitor_id] = visitor
            while len(self._visitors) > self.max_visitors:
                _, oldest = self._visitors.popitem(last=False)
                evicted.append(oldest)
        logger.info(f"New visitor session {visitor_id}")

        for oldest in evicted:
            oldest.close()
            logger.info(f"Evicted visitor session {oldest.id}")
        return visitor

    def close_all(self) -> None:
        with self._lock:
            visitors = list(self._visitors.values())
            self._visitors.clear()
        for visitor in visitors:
            visitor.close()

    def __len__(self) -> int:
        return len(self._visitors)
