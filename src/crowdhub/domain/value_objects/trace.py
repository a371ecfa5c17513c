"""Resolution trace vocabulary."""

from enum import StrEnum


class TraceResult(StrEnum):
    """Outcome recorded for one resolution step."""

    ALLOW = "allow"
    DENY = "deny"
    SKIP = "skip"


class ResolutionStep(StrEnum):
    """Steps of permission resolution, in evaluation order."""

    USER_STATUS = "user_status"
    PERMISSION_LOOKUP = "permission_lookup"
    USER_OVERRIDE = "user_override"
    ROLE_LOOKUP = "role_lookup"
    ROLE_PERMISSIONS = "role_permissions"
    DEFAULT = "default"
