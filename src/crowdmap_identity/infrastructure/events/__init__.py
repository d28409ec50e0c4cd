from crowdmap_identity.infrastructure.events.admin_role_notifier import (
    AdminUserChangedHandler,
    InProcessAdminRoleNotifier,
)

__all__ = ["AdminUserChangedHandler", "InProcessAdminRoleNotifier"]
