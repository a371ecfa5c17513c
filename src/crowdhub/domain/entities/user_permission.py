"""User-level permission override."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from crowdhub.domain.value_objects import PermissionEffect


@dataclass
class UserPermissionOverride:
    """Override - explicit effect for one user on one permission, bypasses roles."""

    user_id: str
    permission_id: UUID
    effect: PermissionEffect
    created_at: datetime
    created_by: str | None = None
