"""Legacy string-permission checker - role to permission-key map from configuration."""

from collections.abc import Iterable, Mapping

from crowdhub.domain.value_objects import StructuredPermission, to_legacy_key

GRANT_ALL = "*"


class LegacyPermissionChecker:
    """Checks flat permission keys by membership in the held roles' key sets.

    No overrides, no deny rules. ``*`` in a role's keys grants every key.
    """

    def __init__(
        self,
        role_permissions: Mapping[str, Iterable[str]],
        roles: Iterable[str],
    ) -> None:
        self._roles = list(roles)
        self._keys: set[str] = set()
        for role in self._roles:
            self._keys.update(role_permissions.get(role, ()))

    @property
    def roles(self) -> list[str]:
        return list(self._roles)

    def has_permission(self, key: str) -> bool:
        return GRANT_ALL in self._keys or key in self._keys

    def has_structured_permission(self, permission: StructuredPermission) -> bool:
        """Check a (resource, action) pair through its ``{action}_{resource}`` key."""
        return self.has_permission(to_legacy_key(permission))

    def has_any_permission(self, keys: Iterable[str]) -> bool:
        return any(self.has_permission(k) for k in keys)

    def has_all_permissions(self, keys: Iterable[str]) -> bool:
        return all(self.has_permission(k) for k in keys)
