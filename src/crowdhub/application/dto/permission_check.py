"""Permission check DTOs."""

from collections.abc import Mapping
from dataclasses import dataclass

from crowdhub.domain.exceptions import ValidationError
from crowdhub.domain.value_objects import StructuredPermission


def _require_text(body: Mapping, field: str) -> str:
    value = body.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Missing required field: {field}")
    return value.strip()


@dataclass
class PermissionCheckInput:
    """Input for a single permission check."""

    user_id: str
    resource: str
    action: str
    include_trace: bool = False

    @classmethod
    def from_request(cls, body: object, default_user_id: str) -> "PermissionCheckInput":
        """Build from a request body; ``userId`` defaults to the caller."""
        if not isinstance(body, Mapping):
            raise ValidationError("Request body must be a JSON object")
        user_id = body.get("userId") or default_user_id
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("Invalid userId")
        include_trace = body.get("includeTrace", False)
        if not isinstance(include_trace, bool):
            raise ValidationError("includeTrace must be a boolean")
        return cls(
            user_id=user_id.strip(),
            resource=_require_text(body, "resource"),
            action=_require_text(body, "action"),
            include_trace=include_trace,
        )


@dataclass
class BatchCheckInput:
    """Input for checking several permissions for one user."""

    user_id: str
    checks: list[StructuredPermission]

    @classmethod
    def from_request(cls, body: object, default_user_id: str) -> "BatchCheckInput":
        if not isinstance(body, Mapping):
            raise ValidationError("Request body must be a JSON object")
        user_id = body.get("userId") or default_user_id
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("Invalid userId")
        raw_checks = body.get("checks")
        if not isinstance(raw_checks, list) or not raw_checks:
            raise ValidationError("Missing required field: checks")
        checks = []
        for item in raw_checks:
            if not isinstance(item, Mapping):
                raise ValidationError("Each check must be an object with resource and action")
            checks.append(
                StructuredPermission(
                    resource=_require_text(item, "resource"),
                    action=_require_text(item, "action"),
                )
            )
        return cls(user_id=user_id.strip(), checks=checks)
