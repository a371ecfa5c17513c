"""Fixtures for API tests."""

import pytest

from crowdhub.config import Settings
from crowdhub.domain.value_objects import PermissionEffect
from crowdhub.interfaces.api.app import create_app
from crowdhub.interfaces.api.middleware.auth import RequestUser
from crowdhub.main import build_resources

from tests.conftest import FakeUnitOfWork, make_uow_factory

USER_HEADER = "X-Test-User"


class AuthBypassMiddleware:
    """Middleware that sets context.user from a test header."""

    async def process_request(self, req, resp):
        user_id = req.get_header(USER_HEADER)
        roles = req.get_header("X-Test-Roles")
        req.context.user = (
            RequestUser(user_id=user_id, realm_roles=roles.split(",") if roles else [])
            if user_id
            else None
        )


@pytest.fixture
def seeded_uow(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """admin-1 is tenant_admin; staff-1 is requester; editor role is unassigned."""
    fake_uow.add_user("admin-1")
    fake_uow.add_user("staff-1")
    manage = fake_uow.add_permission("rbac", "manage")
    read = fake_uow.add_permission("rbac", "read")
    dashboard = fake_uow.add_permission("dashboard", "read")
    tickets = fake_uow.add_permission("tickets", "*")
    fake_uow.add_permission("audit_logs", "read")

    admin = fake_uow.add_role("tenant_admin")
    requester = fake_uow.add_role("requester")
    fake_uow.add_role("editor")
    fake_uow.grant(admin, manage)
    fake_uow.grant(admin, read)
    fake_uow.grant(admin, dashboard)
    fake_uow.grant(requester, dashboard)
    fake_uow.grant(requester, tickets)
    fake_uow.assign("admin-1", admin)
    fake_uow.assign("staff-1", requester)
    fake_uow.override("staff-1", tickets, PermissionEffect.DENY)
    return fake_uow


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        enabled_features=["analytics"],
        legacy_role_permissions={"requester": ["view_dashboard"]},
    )


def _client(uow_factory, settings):
    from falcon.testing import TestClient

    app = create_app(build_resources(uow_factory, settings), [AuthBypassMiddleware()])
    return TestClient(app)


@pytest.fixture
def client(seeded_uow, settings):
    """Falcon ASGI test client over the seeded in-memory store."""
    return _client(make_uow_factory(seeded_uow), settings)


@pytest.fixture
def unavailable_client(settings):
    """Test client whose permission store is unreachable."""
    from tests.conftest import unavailable_uow_factory

    return _client(unavailable_uow_factory, settings)


@pytest.fixture
def legacy_fallback_client(settings):
    """Store is unreachable and the guard may answer from legacy role permissions."""
    from tests.conftest import unavailable_uow_factory

    fallback = settings.model_copy(update={"guard_legacy_fallback": True})
    return _client(unavailable_uow_factory, fallback)


def as_user(user_id: str, roles: str = "") -> dict[str, str]:
    headers = {USER_HEADER: user_id}
    if roles:
        headers["X-Test-Roles"] = roles
    return headers
