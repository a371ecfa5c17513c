"""Revoke role use case."""

import logging

from crowdhub.application.ports import PermissionResolver
from crowdhub.application.use_cases.permission._authorize import ensure_can_manage_rbac
from crowdhub.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RevokeRoleUseCase:
    """Remove a role from a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, actor_id: str, user_id: str, role_name: str) -> None:
        await ensure_can_manage_rbac(self._resolver, actor_id)

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(role_name)
            if not role:
                raise NotFound("Role", role_name)
            existing = await uow.user_roles.get(user_id, role.id)
            if not existing:
                raise NotFound("Role assignment", f"{user_id}/{role_name}")
            await uow.user_roles.delete(user_id, role.id)

        logger.info("User %s revoked role %s from %s", actor_id, role_name, user_id)
