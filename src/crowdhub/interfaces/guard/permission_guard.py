"""Presentation-layer permission guard.

Decides whether guarded content is shown, given one or more permission
specs (legacy keys, ``{resource, action}`` mappings, or a mix). Checks go
through the user's PermissionContext when one is available and fall back to
the LegacyPermissionChecker otherwise.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from crowdhub.application.ports import FeatureFlagStore
from crowdhub.domain.services import PermissionContext
from crowdhub.domain.value_objects import (
    LegacyPermission,
    PermissionSpec,
    StructuredPermission,
    parse_permission,
)
from crowdhub.infrastructure.permission.legacy_checker import LegacyPermissionChecker

ACCESS_DENIED_MESSAGE = "You don't have permission to access this."
FEATURE_DISABLED_MESSAGE = "This feature is not enabled for your company."
LOADING_MESSAGE = "Loading permissions..."


class GuardOutcome(StrEnum):
    """Result of evaluating a guard."""

    LOADING = "loading"
    ALLOWED = "allowed"
    FEATURE_DISABLED = "feature_disabled"
    DENIED = "denied"


@dataclass(frozen=True)
class Notice:
    """Default content rendered in place of guarded children."""

    kind: str
    message: str


def _as_specs(permission: object) -> list[PermissionSpec]:
    if permission is None:
        return []
    if isinstance(permission, (str, Mapping, LegacyPermission, StructuredPermission)):
        return [parse_permission(permission)]
    if isinstance(permission, Iterable):
        return [parse_permission(p) for p in permission]
    return [parse_permission(permission)]


class PermissionGuard:
    """Gate for content that requires permissions and/or a feature flag."""

    def __init__(
        self,
        context: PermissionContext | None = None,
        legacy_checker: LegacyPermissionChecker | None = None,
        feature_flags: FeatureFlagStore | None = None,
        loading: bool = False,
        error: str | None = None,
    ) -> None:
        self._context = context
        self._legacy = legacy_checker
        self._features = feature_flags
        self._loading = loading
        self._error = error

    def _check(self, spec: PermissionSpec) -> bool:
        if self._context is not None:
            if isinstance(spec, LegacyPermission):
                return self._context.has_legacy_permission(spec.key)
            return self._context.check(spec)
        if self._legacy is not None:
            if isinstance(spec, LegacyPermission):
                return self._legacy.has_permission(spec.key)
            return self._legacy.has_structured_permission(spec)
        return False

    def evaluate(
        self,
        permission: object = None,
        *,
        feature: str | None = None,
        require_all: bool = False,
    ) -> GuardOutcome:
        """Decide the outcome without rendering anything."""
        if self._loading:
            return GuardOutcome.LOADING

        if feature and not (self._features and self._features.is_enabled(feature)):
            return GuardOutcome.FEATURE_DISABLED

        specs = _as_specs(permission)
        if not specs:
            return GuardOutcome.ALLOWED
        if self._error:
            return GuardOutcome.DENIED

        if require_all:
            allowed = all(self._check(s) for s in specs)
        else:
            allowed = any(self._check(s) for s in specs)
        return GuardOutcome.ALLOWED if allowed else GuardOutcome.DENIED

    def render(
        self,
        children: object,
        permission: object = None,
        *,
        feature: str | None = None,
        require_all: bool = False,
        fallback: object = None,
        hide_on_denied: bool = False,
        show_loading: bool = False,
    ) -> object | None:
        """Return children, a fallback, a default notice, or None."""
        outcome = self.evaluate(permission, feature=feature, require_all=require_all)
        if outcome == GuardOutcome.ALLOWED:
            return children
        if outcome == GuardOutcome.LOADING:
            return Notice("loading", LOADING_MESSAGE) if show_loading else None
        if hide_on_denied:
            return None
        if fallback is not None:
            return fallback
        if outcome == GuardOutcome.FEATURE_DISABLED:
            return Notice("denied", FEATURE_DISABLED_MESSAGE)
        return Notice("denied", ACCESS_DENIED_MESSAGE)
