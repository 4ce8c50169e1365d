# storefront/schemas/page.py
from sqlmodel import SQLModel

from storefront.core.notify import Notification


class PageView(SQLModel):
    """
    Base for every page view model.

    `notifications` carries the toasts queued for the visitor since the
    last page was rendered.
    """

    notifications: list[Notification] = []
