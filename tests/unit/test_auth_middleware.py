"""Unit tests for AuthMiddleware and the require_permission hook."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import falcon
import pytest

from crowdhub.domain.entities import Decision
from crowdhub.infrastructure.auth.keycloak_provider import OIDCUser, user_from_claims
from crowdhub.interfaces.api.hooks import require_permission
from crowdhub.interfaces.api.middleware.auth import AuthMiddleware


def _request(headers: dict[str, str]):
    req = MagicMock()
    req.context = SimpleNamespace()
    req.get_header.side_effect = lambda name: headers.get(name)
    return req


@pytest.mark.asyncio
async def test_bearer_token_sets_user() -> None:
    keycloak = MagicMock()
    keycloak.decode_token.return_value = OIDCUser(
        user_id="u1", email="u1@example.com", username="u1", realm_roles=["requester"]
    )
    req = _request({"Authorization": "Bearer abc"})

    await AuthMiddleware(keycloak).process_request(req, MagicMock())

    keycloak.decode_token.assert_called_once_with("abc")
    assert req.context.user.user_id == "u1"
    assert req.context.user.realm_roles == ["requester"]


@pytest.mark.asyncio
async def test_rejected_token_leaves_user_unset() -> None:
    keycloak = MagicMock()
    keycloak.decode_token.return_value = None
    req = _request({"Authorization": "Bearer expired"})

    await AuthMiddleware(keycloak).process_request(req, MagicMock())

    assert req.context.user is None


@pytest.mark.asyncio
async def test_dev_header_only_when_enabled() -> None:
    req = _request({"X-Dev-User-Id": "dev-1"})
    await AuthMiddleware(None, allow_dev_header=True).process_request(req, MagicMock())
    assert req.context.user.user_id == "dev-1"

    req = _request({"X-Dev-User-Id": "dev-1"})
    await AuthMiddleware(None).process_request(req, MagicMock())
    assert req.context.user is None


@pytest.mark.asyncio
async def test_hook_allows() -> None:
    resolver = AsyncMock()
    resolver.resolve.return_value = Decision(allowed=True)
    req = _request({})
    req.context.user = SimpleNamespace(user_id="u1")

    await require_permission(resolver, "rbac", "read")(req, MagicMock(), None, {})

    resolver.resolve.assert_awaited_once_with("u1", "rbac", "read")


@pytest.mark.asyncio
async def test_hook_forbids_on_deny() -> None:
    resolver = AsyncMock()
    resolver.resolve.return_value = Decision(allowed=False)
    req = _request({})
    req.context.user = SimpleNamespace(user_id="u1")

    with pytest.raises(falcon.HTTPForbidden):
        await require_permission(resolver, "rbac", "read")(req, MagicMock(), None, {})


@pytest.mark.asyncio
async def test_hook_requires_user() -> None:
    req = _request({})
    req.context.user = None

    with pytest.raises(falcon.HTTPUnauthorized):
        await require_permission(AsyncMock(), "rbac", "read")(req, MagicMock(), None, {})


def test_claims_merge_realm_and_client_roles() -> None:
    claims = {
        "active": True,
        "sub": "u1",
        "email": "u1@example.com",
        "realm_access": {"roles": ["requester"]},
        "resource_access": {"crowdhub-api": {"roles": ["manager", "requester"]}},
    }

    user = user_from_claims(claims, "crowdhub-api")

    assert user.user_id == "u1"
    assert user.realm_roles == ["requester", "manager"]


def test_inactive_claims_give_no_user() -> None:
    assert user_from_claims({"active": False, "sub": "u1"}) is None
    assert user_from_claims({"active": True}) is None
