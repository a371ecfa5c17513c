"""Domain exceptions."""


class CrowdHubError(Exception):
    """Base exception for CrowdHub."""

    pass


class PermissionDenied(CrowdHubError):
    """User does not have permission for the requested action."""

    pass


class NotFound(CrowdHubError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: object) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class ValidationError(CrowdHubError):
    """Validation failed for input data."""

    pass


class StoreUnavailable(CrowdHubError):
    """Permission store could not be reached or failed mid-query."""

    pass
