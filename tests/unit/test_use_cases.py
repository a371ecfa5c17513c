"""Unit tests for RBAC administration use cases."""

from unittest.mock import AsyncMock

import pytest

from crowdhub.application.use_cases.permission.assign_role import AssignRoleUseCase
from crowdhub.application.use_cases.permission.resolve_permission import (
    ResolvePermissionUseCase,
)
from crowdhub.application.use_cases.permission.revoke_role import RevokeRoleUseCase
from crowdhub.application.use_cases.permission.user_override import (
    ClearUserOverrideUseCase,
    SetUserOverrideUseCase,
)
from crowdhub.domain.entities import Decision
from crowdhub.domain.exceptions import NotFound, PermissionDenied, ValidationError
from crowdhub.domain.value_objects import PermissionEffect

from tests.conftest import FakeUnitOfWork


@pytest.fixture
def admin_uow(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """admin-1 holds tenant_admin (rbac:manage); u1 exists with no roles."""
    fake_uow.add_user("admin-1")
    fake_uow.add_user("u1")
    manage = fake_uow.add_permission("rbac", "manage")
    fake_uow.add_permission("articles", "edit")
    admin = fake_uow.add_role("tenant_admin")
    fake_uow.add_role("editor")
    fake_uow.grant(admin, manage)
    fake_uow.assign("admin-1", admin)
    return fake_uow


@pytest.fixture
def resolver(uow_factory) -> ResolvePermissionUseCase:
    return ResolvePermissionUseCase(unit_of_work_factory=uow_factory)


def _denying_resolver() -> AsyncMock:
    mock = AsyncMock()
    mock.resolve.return_value = Decision(allowed=False)
    return mock


# --- AssignRoleUseCase ---


@pytest.mark.asyncio
async def test_assign_role_success(uow_factory, resolver, admin_uow) -> None:
    use_case = AssignRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    assignment = await use_case.execute("admin-1", "u1", "editor")

    editor = await admin_uow.roles.get_by_name("editor")
    assert assignment.role_id == editor.id
    assert [r.name for r in await admin_uow.roles.list_for_user("u1")] == ["editor"]


@pytest.mark.asyncio
async def test_assign_role_is_idempotent(uow_factory, resolver, admin_uow) -> None:
    use_case = AssignRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    first = await use_case.execute("admin-1", "u1", "editor")
    second = await use_case.execute("admin-1", "u1", "editor")

    assert first == second
    assert len(await admin_uow.user_roles.list_by_user("u1")) == 1


@pytest.mark.asyncio
async def test_assign_unknown_role_not_found(uow_factory, resolver, admin_uow) -> None:
    use_case = AssignRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)
    with pytest.raises(NotFound, match="Role not found: ghost"):
        await use_case.execute("admin-1", "u1", "ghost")


@pytest.mark.asyncio
async def test_assign_unknown_user_not_found(uow_factory, resolver, admin_uow) -> None:
    use_case = AssignRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)
    with pytest.raises(NotFound, match="User not found"):
        await use_case.execute("admin-1", "nobody", "editor")


@pytest.mark.asyncio
async def test_assign_role_requires_rbac_manage(uow_factory, resolver, admin_uow) -> None:
    use_case = AssignRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    with pytest.raises(PermissionDenied):
        await use_case.execute("u1", "u1", "editor")
    assert await admin_uow.user_roles.list_by_user("u1") == []


# --- RevokeRoleUseCase ---


@pytest.mark.asyncio
async def test_revoke_role_success(uow_factory, resolver, admin_uow) -> None:
    admin_uow.assign("u1", await admin_uow.roles.get_by_name("editor"))
    use_case = RevokeRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    await use_case.execute("admin-1", "u1", "editor")

    assert await admin_uow.user_roles.list_by_user("u1") == []


@pytest.mark.asyncio
async def test_revoke_missing_assignment_not_found(uow_factory, resolver, admin_uow) -> None:
    use_case = RevokeRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)
    with pytest.raises(NotFound, match="Role assignment not found"):
        await use_case.execute("admin-1", "u1", "editor")


@pytest.mark.asyncio
async def test_revoke_role_permission_denied(uow_factory, admin_uow) -> None:
    resolver = _denying_resolver()
    use_case = RevokeRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    with pytest.raises(PermissionDenied):
        await use_case.execute("admin-1", "u1", "editor")
    resolver.resolve.assert_awaited_once_with("admin-1", "rbac", "manage")


# --- SetUserOverrideUseCase / ClearUserOverrideUseCase ---


@pytest.mark.asyncio
async def test_set_override_upserts(uow_factory, resolver, admin_uow) -> None:
    use_case = SetUserOverrideUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    await use_case.execute("admin-1", "u1", "articles", "edit", "allow")
    override = await use_case.execute("admin-1", "u1", "articles", "edit", "deny")

    assert override.effect == PermissionEffect.DENY
    assert override.created_by == "admin-1"
    stored = await admin_uow.user_permissions.list_by_user("u1")
    assert len(stored) == 1
    assert stored[0].effect == PermissionEffect.DENY


@pytest.mark.asyncio
async def test_set_override_changes_decision(uow_factory, resolver, admin_uow) -> None:
    use_case = SetUserOverrideUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    before = await resolver.resolve("u1", "articles", "edit")
    await use_case.execute("admin-1", "u1", "articles", "edit", PermissionEffect.ALLOW)
    after = await resolver.resolve("u1", "articles", "edit")

    assert before.allowed is False
    assert after.allowed is True


@pytest.mark.asyncio
async def test_set_override_requires_exact_permission(uow_factory, resolver, admin_uow) -> None:
    use_case = SetUserOverrideUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)
    with pytest.raises(NotFound, match="Permission not found: articles:publish"):
        await use_case.execute("admin-1", "u1", "articles", "publish", "allow")


@pytest.mark.asyncio
async def test_set_override_invalid_effect(uow_factory, admin_uow) -> None:
    resolver = AsyncMock()
    use_case = SetUserOverrideUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)

    with pytest.raises(ValidationError, match="Invalid effect"):
        await use_case.execute("admin-1", "u1", "articles", "edit", "maybe")
    resolver.resolve.assert_not_awaited()


@pytest.mark.asyncio
async def test_clear_override(uow_factory, resolver, admin_uow) -> None:
    edit = await admin_uow.permissions.get_by_resource_action("articles", "edit")
    admin_uow.override("u1", edit, PermissionEffect.ALLOW)
    use_case = ClearUserOverrideUseCase(
        unit_of_work_factory=uow_factory, permission_resolver=resolver
    )

    await use_case.execute("admin-1", "u1", "articles", "edit")

    assert await admin_uow.user_permissions.get("u1", edit.id) is None


@pytest.mark.asyncio
async def test_clear_missing_override_not_found(uow_factory, resolver, admin_uow) -> None:
    use_case = ClearUserOverrideUseCase(
        unit_of_work_factory=uow_factory, permission_resolver=resolver
    )
    with pytest.raises(NotFound, match="Override not found"):
        await use_case.execute("admin-1", "u1", "articles", "edit")
