"""Auth middleware - resolves the calling user from a bearer token."""

from dataclasses import dataclass, field

import falcon.asgi

DEV_USER_HEADER = "X-Dev-User-Id"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None
    realm_roles: list[str] = field(default_factory=list)


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.user (None when unauthenticated).

    Without a Keycloak provider and with ``allow_dev_header`` set, the user id
    is taken from the ``X-Dev-User-Id`` header for local development.
    """

    def __init__(self, keycloak_provider=None, allow_dev_header: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._allow_dev_header = allow_dev_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and self._keycloak:
            user = self._keycloak.decode_token(auth[7:])
            if user and user.user_id:
                req.context.user = RequestUser(
                    user_id=user.user_id,
                    email=user.email,
                    username=user.username,
                    realm_roles=list(user.realm_roles),
                )
            return
        if self._keycloak is None and self._allow_dev_header:
            dev_user = req.get_header(DEV_USER_HEADER)
            if dev_user:
                req.context.user = RequestUser(user_id=dev_user)
