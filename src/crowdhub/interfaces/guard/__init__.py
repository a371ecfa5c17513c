"""Permission guard for presentation code."""

from crowdhub.interfaces.guard.permission_guard import (
    ACCESS_DENIED_MESSAGE,
    FEATURE_DISABLED_MESSAGE,
    LOADING_MESSAGE,
    GuardOutcome,
    Notice,
    PermissionGuard,
)

__all__ = [
    "ACCESS_DENIED_MESSAGE",
    "FEATURE_DISABLED_MESSAGE",
    "LOADING_MESSAGE",
    "GuardOutcome",
    "Notice",
    "PermissionGuard",
]
