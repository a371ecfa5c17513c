"""Keycloak token introspection - identity for API callers.

Only identity comes from the token. Portal roles used by the resolver live in
the permission store; realm and client roles are kept for the legacy checker.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Caller identity taken from an active access token."""

    user_id: str
    email: str | None = None
    username: str | None = None
    realm_roles: list[str] = field(default_factory=list)


def user_from_claims(claims: Mapping, client_id: str | None = None) -> OIDCUser | None:
    """Build the caller from introspection claims; None for inactive or subject-less tokens."""
    if not claims.get("active") or not claims.get("sub"):
        return None
    roles = list(claims.get("realm_access", {}).get("roles", []))
    if client_id:
        for role in claims.get("resource_access", {}).get(client_id, {}).get("roles", []):
            if role not in roles:
                roles.append(role)
    return OIDCUser(
        user_id=claims["sub"],
        email=claims.get("email"),
        username=claims.get("preferred_username"),
        realm_roles=roles,
    )


class KeycloakProvider:
    """Resolves bearer tokens through the Keycloak introspection endpoint."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._client_id = client_id
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token; None when Keycloak rejects it or it is no longer active."""
        try:
            claims = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        return user_from_claims(claims, self._client_id)
