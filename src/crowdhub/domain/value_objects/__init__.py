"""Domain value objects."""

from crowdhub.domain.value_objects.permission_effect import PermissionEffect
from crowdhub.domain.value_objects.permission_spec import (
    WILDCARD,
    LegacyPermission,
    PermissionSpec,
    StructuredPermission,
    normalize_permission,
    parse_permission,
    to_legacy_key,
)
from crowdhub.domain.value_objects.trace import ResolutionStep, TraceResult

__all__ = [
    "WILDCARD",
    "LegacyPermission",
    "PermissionEffect",
    "PermissionSpec",
    "ResolutionStep",
    "StructuredPermission",
    "TraceResult",
    "normalize_permission",
    "parse_permission",
    "to_legacy_key",
]
