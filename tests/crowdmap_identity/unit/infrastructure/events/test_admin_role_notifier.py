"""Unit tests for InProcessAdminRoleNotifier."""

import logging

from crowdmap_identity.domain.user import (
    AdminUserAction,
    AdminUserChanged,
    User,
    UserRole,
)
from crowdmap_identity.infrastructure.events import InProcessAdminRoleNotifier


def _event() -> AdminUserChanged:
    user = User.reconstitute(1, "Root", UserRole.ADMIN.value, None, None, None, None)
    return AdminUserChanged.from_user(AdminUserAction.CREATED, user)


class TestInProcessAdminRoleNotifier:
    def test_delivers_to_all_subscribers_in_order(self):
        notifier = InProcessAdminRoleNotifier()
        calls = []
        notifier.subscribe(lambda e: calls.append(("first", e.user_id)))
        notifier.subscribe(lambda e: calls.append(("second", e.user_id)))

        notifier.notify(_event())

        assert calls == [("first", 1), ("second", 1)]

    def test_subscribe_is_idempotent(self):
        notifier = InProcessAdminRoleNotifier()
        events = []

        notifier.subscribe(events.append)
        notifier.subscribe(events.append)
        notifier.notify(_event())

        assert len(events) == 1

    def test_unsubscribe(self):
        notifier = InProcessAdminRoleNotifier()
        events = []
        notifier.subscribe(events.append)

        notifier.unsubscribe(events.append)
        notifier.notify(_event())

        assert events == []
        assert notifier.handlers == ()

    def test_failing_subscriber_is_logged_and_skipped(self, caplog):
        """A raising handler does not stop later handlers or the caller."""
        notifier = InProcessAdminRoleNotifier()
        events = []

        def broken(event):
            raise RuntimeError("mail server down")

        notifier.subscribe(broken)
        notifier.subscribe(events.append)

        with caplog.at_level(logging.ERROR):
            notifier.notify(_event())

        assert len(events) == 1
        assert "failed" in caplog.text

    def test_event_snapshot(self):
        event = _event()

        assert event.action is AdminUserAction.CREATED
        assert event.role == "admin"
        assert event.realname == "Root"
        assert event.occurred_at.tzinfo is not None
