"""In-process delivery of admin-role change events to subscribers."""

import logging
from collections.abc import Callable

from crowdmap_identity.domain.user import AdminRoleChangeNotifier, AdminUserChanged

logger = logging.getLogger(__name__)

AdminUserChangedHandler = Callable[[AdminUserChanged], None]


class InProcessAdminRoleNotifier(AdminRoleChangeNotifier):
    """Calls every subscribed handler, in subscription order.

    A failing handler is logged and skipped; the remaining handlers still
    run and the caller never sees the error.
    """

    def __init__(self) -> None:
        self._handlers: list[AdminUserChangedHandler] = []

    def subscribe(self, handler: AdminUserChangedHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: AdminUserChangedHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def handlers(self) -> tuple[AdminUserChangedHandler, ...]:
        return tuple(self._handlers)

    def notify(self, event: AdminUserChanged) -> None:
        logger.debug(
            "Admin user %s: %s (%d subscribers)",
            event.action.value,
            event.user_id,
            len(self._handlers),
        )
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Admin-role subscriber %r failed for user %s",
                    handler,
                    event.user_id,
                )
