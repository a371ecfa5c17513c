"""Shared authorization for RBAC administration use cases."""

from crowdhub.application.ports import PermissionResolver
from crowdhub.domain.exceptions import PermissionDenied

RBAC_RESOURCE = "rbac"
MANAGE_ACTION = "manage"


async def ensure_can_manage_rbac(resolver: PermissionResolver, actor_id: str) -> None:
    """Raise PermissionDenied unless the actor may manage roles and permissions."""
    decision = await resolver.resolve(actor_id, RBAC_RESOURCE, MANAGE_ACTION)
    if not decision.allowed:
        raise PermissionDenied("User does not have permission to manage access control")
