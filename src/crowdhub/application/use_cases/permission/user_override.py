"""Set and clear user permission overrides."""

import logging
from datetime import UTC, datetime

from crowdhub.application.ports import PermissionResolver
from crowdhub.application.use_cases.permission._authorize import ensure_can_manage_rbac
from crowdhub.domain.entities import UserPermissionOverride
from crowdhub.domain.exceptions import NotFound, ValidationError
from crowdhub.domain.value_objects import PermissionEffect

logger = logging.getLogger(__name__)


def _parse_effect(effect: object) -> PermissionEffect:
    try:
        return PermissionEffect(effect)
    except ValueError as e:
        raise ValidationError(f"Invalid effect: {effect!r}") from e


class SetUserOverrideUseCase:
    """Create or replace a user's override for an exact permission."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(
        self,
        actor_id: str,
        user_id: str,
        resource: str,
        action: str,
        effect: str | PermissionEffect,
    ) -> UserPermissionOverride:
        parsed = _parse_effect(effect)
        await ensure_can_manage_rbac(self._resolver, actor_id)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_id(user_id)
            if not profile:
                raise NotFound("User", user_id)
            permission = await uow.permissions.get_by_resource_action(resource, action)
            if not permission:
                raise NotFound("Permission", f"{resource}:{action}")

            override = UserPermissionOverride(
                user_id=user_id,
                permission_id=permission.id,
                effect=parsed,
                created_at=datetime.now(UTC),
                created_by=actor_id,
            )
            await uow.user_permissions.upsert(override)

        logger.info(
            "User %s set %s override on %s:%s for %s", actor_id, parsed, resource, action, user_id
        )
        return override


class ClearUserOverrideUseCase:
    """Remove a user's override for an exact permission."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, actor_id: str, user_id: str, resource: str, action: str) -> None:
        await ensure_can_manage_rbac(self._resolver, actor_id)

        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_resource_action(resource, action)
            if not permission:
                raise NotFound("Permission", f"{resource}:{action}")
            existing = await uow.user_permissions.get(user_id, permission.id)
            if not existing:
                raise NotFound("Override", f"{user_id}/{resource}:{action}")
            await uow.user_permissions.delete(user_id, permission.id)

        logger.info("User %s cleared override on %s:%s for %s", actor_id, resource, action, user_id)
