"""Resolve permission use case - layered RBAC decision against the store."""

import logging

from crowdhub.domain.entities import Decision, Permission
from crowdhub.domain.exceptions import ValidationError
from crowdhub.domain.services import (
    TraceRecorder,
    aggregate_role_effects,
    lookup_candidates,
)
from crowdhub.domain.value_objects import (
    PermissionEffect,
    ResolutionStep,
    StructuredPermission,
    TraceResult,
)

logger = logging.getLogger(__name__)


def _validate(user_id: object, resource: object, action: object) -> None:
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError("Missing required field: userId")
    if not isinstance(resource, str) or not resource.strip():
        raise ValidationError("Missing required field: resource")
    if not isinstance(action, str) or not action.strip():
        raise ValidationError("Missing required field: action")


class ResolvePermissionUseCase:
    """Decide whether a user may perform an action on a resource.

    Order: user status, permission lookup (exact, ``resource:*``, ``*:*``),
    user override, role rules (deny wins), default deny. Read-only; each call
    re-reads the store. Store failures propagate as ``StoreUnavailable``.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(
        self,
        user_id: str,
        resource: str,
        action: str,
        include_trace: bool = False,
    ) -> Decision:
        """Resolve one (resource, action) pair for a user."""
        _validate(user_id, resource, action)
        user_id, resource, action = user_id.strip(), resource.strip(), action.strip()
        async with self._uow_factory() as uow:
            decision = await self._resolve(uow, user_id, resource, action, include_trace)
        logger.debug(
            "Permission %s:%s for user %s -> %s",
            resource,
            action,
            user_id,
            "allow" if decision.allowed else "deny",
        )
        return decision

    async def check_many(
        self, user_id: str, checks: list[StructuredPermission]
    ) -> dict[str, bool]:
        """Resolve several pairs independently, keyed by ``resource:action``."""
        results: dict[str, bool] = {}
        for check in checks:
            decision = await self.resolve(user_id, check.resource, check.action)
            results[check.key] = decision.allowed
        return results

    async def _resolve(
        self,
        uow,
        user_id: str,
        resource: str,
        action: str,
        include_trace: bool,
    ) -> Decision:
        trace = TraceRecorder(include_trace)
        key = f"{resource}:{action}"

        profile = await uow.profiles.get_by_id(user_id)
        if not profile or not profile.is_active:
            return trace.deny(ResolutionStep.USER_STATUS, "User not found or inactive")

        permission, match = await self._lookup_permission(uow, resource, action)
        if permission is None:
            return trace.deny(
                ResolutionStep.PERMISSION_LOOKUP, f"No permission defined for {key}"
            )
        trace.record(
            ResolutionStep.PERMISSION_LOOKUP,
            TraceResult.SKIP,
            f"Resolved {key} via {match} match {permission.key}",
        )

        override = await uow.user_permissions.get(user_id, permission.id)
        if override:
            return trace.finish(
                ResolutionStep.USER_OVERRIDE,
                override.effect,
                f"User has explicit {override.effect} override for {key}",
            )

        roles = await uow.roles.list_for_user(user_id)
        if not roles:
            return trace.deny(ResolutionStep.ROLE_LOOKUP, "User has no roles assigned")

        rules = await uow.role_permissions.list_for_roles(
            [r.id for r in roles], permission.id
        )
        effect = aggregate_role_effects(r.effect for r in rules)
        if effect == PermissionEffect.DENY:
            return trace.deny(
                ResolutionStep.ROLE_PERMISSIONS, f"At least one role has deny for {key}"
            )
        if effect == PermissionEffect.ALLOW:
            return trace.allow(
                ResolutionStep.ROLE_PERMISSIONS, f"At least one role has allow for {key}"
            )

        return trace.deny(
            ResolutionStep.DEFAULT, "No matching allow rules found - default deny"
        )

    async def _lookup_permission(
        self, uow, resource: str, action: str
    ) -> tuple[Permission | None, str | None]:
        for res, act, label in lookup_candidates(resource, action):
            permission = await uow.permissions.get_by_resource_action(res, act)
            if permission:
                return permission, label
        return None, None
