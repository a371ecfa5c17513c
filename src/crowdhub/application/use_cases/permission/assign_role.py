"""Assign role use case."""

import logging
from datetime import UTC, datetime

from crowdhub.application.ports import PermissionResolver
from crowdhub.application.use_cases.permission._authorize import ensure_can_manage_rbac
from crowdhub.domain.entities import UserRole
from crowdhub.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class AssignRoleUseCase:
    """Assign a role to a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, actor_id: str, user_id: str, role_name: str) -> UserRole:
        """Assign role to user. Existing assignment is returned unchanged."""
        await ensure_can_manage_rbac(self._resolver, actor_id)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_id(user_id)
            if not profile:
                raise NotFound("User", user_id)
            role = await uow.roles.get_by_name(role_name)
            if not role:
                raise NotFound("Role", role_name)

            existing = await uow.user_roles.get(user_id, role.id)
            if existing:
                return existing

            user_role = UserRole(user_id=user_id, role_id=role.id, created_at=datetime.now(UTC))
            await uow.user_roles.create(user_role)

        logger.info("User %s assigned role %s to %s", actor_id, role_name, user_id)
        return user_role
