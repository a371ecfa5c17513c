"""Permission resolver port - RBAC authorization."""

from typing import Protocol

from crowdhub.domain.entities import Decision


class PermissionResolver(Protocol):
    """Port for resolving a user's access to a (resource, action) pair."""

    async def resolve(
        self,
        user_id: str,
        resource: str,
        action: str,
        include_trace: bool = False,
    ) -> Decision: ...
