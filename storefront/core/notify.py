# storefront/core/notify.py
from collections import deque
from typing import Literal

from fastapi import HTTPException, status
from sqlmodel import SQLModel

Level = Literal["success", "error"]


class Notification(SQLModel):
    """A short transient message shown to the visitor (a "toast")."""

    level: Level
    message: str


class Notifier:
    """
    Per-visitor queue of transient notifications.

    Messages pile up until the next page view (or error response) drains
    them, which is when the visitor actually gets to see them.
    """

    def __init__(self) -> None:
        self._pending: deque[Notification] = deque()

    def success(self, message: str) -> None:
        self._pending.append(Notification(level="success", message=message))

    def error(self, message: str) -> None:
        self._pending.append(Notification(level="error", message=message))

    def fail(
        self,
        message: str,
        status_code: int = status.HTTP_502_BAD_GATEWAY,
    ) -> HTTPException:
        """
        Record an error notification and build the matching HTTPException.

        Usage:
            raise self.notifier.fail("Error adding to cart")
        """
        self.error(message)
        return HTTPException(status_code=status_code, detail=message)

    def drain(self) -> list[Notification]:
        drained = list(self._pending)
        self._pending.clear()
        return drained
