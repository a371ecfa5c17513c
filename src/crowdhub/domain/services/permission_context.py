"""Preloaded RBAC snapshot for one user.

Answers the same questions as the store-backed resolver synchronously, from
data fetched once. Evaluation order is user override, role rules, default
deny, with the same wildcard lookup as the resolver.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from uuid import UUID

from crowdhub.domain.entities import (
    Decision,
    Permission,
    Role,
    RolePermission,
    UserPermissionOverride,
)
from crowdhub.domain.exceptions import ValidationError
from crowdhub.domain.services.permission_policy import (
    TraceRecorder,
    aggregate_role_effects,
    lookup_candidates,
)
from crowdhub.domain.value_objects import (
    PermissionEffect,
    PermissionSpec,
    ResolutionStep,
    StructuredPermission,
    TraceResult,
    normalize_permission,
    parse_permission,
)

SUPER_ADMIN = "super_admin"
TENANT_ADMIN = "tenant_admin"


@dataclass
class PermissionContext:
    """RBAC data for one user plus the checks that run against it."""

    user_id: str
    is_active: bool
    roles: list[Role]
    permissions: list[Permission]
    overrides: dict[UUID, PermissionEffect] = field(default_factory=dict)
    role_rules: dict[UUID, list[RolePermission]] = field(default_factory=dict)
    legacy_aliases: Mapping[str, StructuredPermission] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        user_id: str,
        is_active: bool,
        roles: Iterable[Role],
        permissions: Iterable[Permission],
        overrides: Iterable[UserPermissionOverride],
        role_rules: Iterable[RolePermission],
        legacy_aliases: Mapping[str, StructuredPermission] | None = None,
    ) -> "PermissionContext":
        rules_by_permission: dict[UUID, list[RolePermission]] = {}
        for rule in role_rules:
            rules_by_permission.setdefault(rule.permission_id, []).append(rule)
        return cls(
            user_id=user_id,
            is_active=is_active,
            roles=list(roles),
            permissions=list(permissions),
            overrides={o.permission_id: o.effect for o in overrides},
            role_rules=rules_by_permission,
            legacy_aliases=dict(legacy_aliases or {}),
        )

    @property
    def role_names(self) -> list[str]:
        return [r.name for r in self.roles]

    @property
    def is_super_admin(self) -> bool:
        return self.has_role(SUPER_ADMIN)

    @property
    def is_tenant_admin(self) -> bool:
        return self.has_role(TENANT_ADMIN)

    def _find_permission(self, resource: str, action: str) -> tuple[Permission | None, str | None]:
        by_pair = {(p.resource, p.action): p for p in self.permissions}
        for res, act, label in lookup_candidates(resource, action):
            permission = by_pair.get((res, act))
            if permission:
                return permission, label
        return None, None

    def explain(self, resource: str, action: str) -> Decision:
        """Decision with full trace for a (resource, action) pair."""
        trace = TraceRecorder(True)
        key = f"{resource}:{action}"

        if not self.is_active:
            return trace.deny(ResolutionStep.USER_STATUS, "User not found or inactive")

        permission, match = self._find_permission(resource, action)
        if permission is None:
            return trace.deny(
                ResolutionStep.PERMISSION_LOOKUP, f"No permission defined for {key}"
            )
        trace.record(
            ResolutionStep.PERMISSION_LOOKUP,
            TraceResult.SKIP,
            f"Resolved {key} via {match} match {permission.key}",
        )

        override = self.overrides.get(permission.id)
        if override:
            return trace.finish(
                ResolutionStep.USER_OVERRIDE,
                override,
                f"User has explicit {override} override for {key}",
            )

        if not self.roles:
            return trace.deny(ResolutionStep.ROLE_LOOKUP, "User has no roles assigned")

        held = {r.id: r.name for r in self.roles}
        rules = [r for r in self.role_rules.get(permission.id, []) if r.role_id in held]
        effect = aggregate_role_effects(r.effect for r in rules)
        if effect is not None:
            deciding = next(r for r in rules if r.effect == effect)
            return trace.finish(
                ResolutionStep.ROLE_PERMISSIONS,
                effect,
                f"Role '{held[deciding.role_id]}' has {effect} for {key}",
            )

        return trace.deny(
            ResolutionStep.DEFAULT, f"No matching permission rules for {key} - default deny"
        )

    def has_permission(self, resource: str, action: str) -> bool:
        return self.explain(resource, action).allowed

    def has_legacy_permission(self, key: str) -> bool:
        """Check a legacy permission key by mapping it onto a (resource, action) pair."""
        try:
            structured = normalize_permission(parse_permission(key), self.legacy_aliases)
        except ValidationError:
            return False
        return self.has_permission(structured.resource, structured.action)

    def check(self, spec: PermissionSpec) -> bool:
        structured = normalize_permission(spec, self.legacy_aliases)
        return self.has_permission(structured.resource, structured.action)

    def has_any_permission(self, specs: Iterable[object]) -> bool:
        return any(self.check(parse_permission(s)) for s in specs)

    def has_all_permissions(self, specs: Iterable[object]) -> bool:
        return all(self.check(parse_permission(s)) for s in specs)

    def has_role(self, role_name: str) -> bool:
        return role_name in self.role_names

    def has_any_role(self, role_names: Iterable[str]) -> bool:
        names = set(self.role_names)
        return any(n in names for n in role_names)

    def effective_permissions(self) -> list[tuple[Permission, Decision]]:
        """Every known permission with this user's decision, sorted by resource and action."""
        ordered = sorted(self.permissions, key=lambda p: (p.resource, p.action))
        return [(p, self.explain(p.resource, p.action)) for p in ordered]
