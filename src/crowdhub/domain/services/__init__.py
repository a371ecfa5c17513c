"""Domain services."""

from crowdhub.domain.services.permission_context import PermissionContext
from crowdhub.domain.services.permission_policy import (
    EXACT,
    GLOBAL_WILDCARD,
    RESOURCE_WILDCARD,
    TraceRecorder,
    aggregate_role_effects,
    lookup_candidates,
)

__all__ = [
    "EXACT",
    "GLOBAL_WILDCARD",
    "RESOURCE_WILDCARD",
    "PermissionContext",
    "TraceRecorder",
    "aggregate_role_effects",
    "lookup_candidates",
]
