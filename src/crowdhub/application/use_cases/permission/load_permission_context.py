"""Load permission context use case."""

from collections.abc import Mapping

from crowdhub.domain.exceptions import ValidationError
from crowdhub.domain.services import PermissionContext
from crowdhub.domain.value_objects import StructuredPermission


class LoadPermissionContextUseCase:
    """Fetch all RBAC data for one user in a single unit of work."""

    def __init__(
        self,
        unit_of_work_factory: type,
        legacy_aliases: Mapping[str, StructuredPermission] | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._legacy_aliases = dict(legacy_aliases or {})

    async def execute(self, user_id: str) -> PermissionContext:
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("Missing required field: userId")

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_id(user_id)
            roles = await uow.roles.list_for_user(user_id)
            permissions = await uow.permissions.list_all()
            overrides = await uow.user_permissions.list_by_user(user_id)
            rules = (
                await uow.role_permissions.list_for_roles([r.id for r in roles])
                if roles
                else []
            )

        return PermissionContext.build(
            user_id=user_id,
            is_active=bool(profile and profile.is_active),
            roles=roles,
            permissions=permissions,
            overrides=overrides,
            role_rules=rules,
            legacy_aliases=self._legacy_aliases,
        )
