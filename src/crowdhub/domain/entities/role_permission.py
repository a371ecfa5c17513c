"""Role-level permission rule."""

from dataclasses import dataclass
from uuid import UUID

from crowdhub.domain.value_objects import PermissionEffect


@dataclass
class RolePermission:
    """Rule - role allows or denies a permission."""

    role_id: UUID
    permission_id: UUID
    effect: PermissionEffect
