"""Repository ports."""

from crowdhub.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from crowdhub.application.ports.repositories.profile_repository import ProfileRepository
from crowdhub.application.ports.repositories.role_permission_repository import (
    RolePermissionRepository,
)
from crowdhub.application.ports.repositories.role_repository import RoleRepository
from crowdhub.application.ports.repositories.user_permission_repository import (
    UserPermissionRepository,
)
from crowdhub.application.ports.repositories.user_role_repository import (
    UserRoleRepository,
)

__all__ = [
    "PermissionRepository",
    "ProfileRepository",
    "RolePermissionRepository",
    "RoleRepository",
    "UserPermissionRepository",
    "UserRoleRepository",
]
