"""Effect a rule assigns to a permission."""

from enum import StrEnum


class PermissionEffect(StrEnum):
    """Allow or deny."""

    ALLOW = "allow"
    DENY = "deny"
