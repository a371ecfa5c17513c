"""Domain entities."""

from crowdhub.domain.entities.decision import Decision, TraceStep
from crowdhub.domain.entities.permission import Permission
from crowdhub.domain.entities.profile import Profile
from crowdhub.domain.entities.role import Role
from crowdhub.domain.entities.role_permission import RolePermission
from crowdhub.domain.entities.user_permission import UserPermissionOverride
from crowdhub.domain.entities.user_role import UserRole

__all__ = [
    "Decision",
    "Permission",
    "Profile",
    "Role",
    "RolePermission",
    "TraceStep",
    "UserPermissionOverride",
    "UserRole",
]
