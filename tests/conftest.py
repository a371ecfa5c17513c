"""Pytest fixtures for CrowdHub tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from crowdhub.domain.entities import (
    Decision,
    Permission,
    Profile,
    Role,
    RolePermission,
    UserPermissionOverride,
    UserRole,
)
from crowdhub.domain.exceptions import StoreUnavailable
from crowdhub.domain.value_objects import PermissionEffect


# --- Fake repositories ---


class FakeProfileRepository:
    """In-memory profile repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Profile] = {}

    async def get_by_id(self, user_id: str) -> Profile | None:
        return self._by_id.get(user_id)

    def add(self, profile: Profile) -> None:
        self._by_id[profile.id] = profile


class FakePermissionRepository:
    """In-memory permission repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Permission] = {}

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        return self._by_id.get(permission_id)

    async def get_by_resource_action(self, resource: str, action: str) -> Permission | None:
        for p in self._by_id.values():
            if p.resource == resource and p.action == action:
                return p
        return None

    async def list_all(self) -> list[Permission]:
        return sorted(self._by_id.values(), key=lambda p: (p.resource, p.action))

    def add(self, permission: Permission) -> None:
        self._by_id[permission.id] = permission


class FakeUserRoleRepository:
    """In-memory user-role assignments."""

    def __init__(self) -> None:
        self._items: dict[tuple[str, UUID], UserRole] = {}

    async def list_by_user(self, user_id: str) -> list[UserRole]:
        return [ur for (uid, _), ur in self._items.items() if uid == user_id]

    async def get(self, user_id: str, role_id: UUID) -> UserRole | None:
        return self._items.get((user_id, role_id))

    async def create(self, user_role: UserRole) -> UserRole:
        self._items[(user_role.user_id, user_role.role_id)] = user_role
        return user_role

    async def delete(self, user_id: str, role_id: UUID) -> None:
        self._items.pop((user_id, role_id), None)


class FakeRoleRepository:
    """In-memory role repository; user roles come from the assignment repository."""

    def __init__(self, user_roles: FakeUserRoleRepository) -> None:
        self._by_id: dict[UUID, Role] = {}
        self._user_roles = user_roles

    async def get_by_name(self, name: str) -> Role | None:
        for r in self._by_id.values():
            if r.name == name:
                return r
        return None

    async def list_for_user(self, user_id: str) -> list[Role]:
        assignments = await self._user_roles.list_by_user(user_id)
        roles = [self._by_id[a.role_id] for a in assignments if a.role_id in self._by_id]
        return sorted(roles, key=lambda r: r.name)

    def add_role(self, role: Role) -> None:
        self._by_id[role.id] = role


class FakeRolePermissionRepository:
    """In-memory role permission rules."""

    def __init__(self) -> None:
        self._rules: list[RolePermission] = []

    async def list_for_roles(
        self, role_ids: list[UUID], permission_id: UUID | None = None
    ) -> list[RolePermission]:
        ids = set(role_ids)
        return [
            r
            for r in self._rules
            if r.role_id in ids and (permission_id is None or r.permission_id == permission_id)
        ]

    def add(self, rule: RolePermission) -> None:
        self._rules.append(rule)


class FakeUserPermissionRepository:
    """In-memory user overrides, unique per (user, permission)."""

    def __init__(self) -> None:
        self._items: dict[tuple[str, UUID], UserPermissionOverride] = {}

    async def get(self, user_id: str, permission_id: UUID) -> UserPermissionOverride | None:
        return self._items.get((user_id, permission_id))

    async def list_by_user(self, user_id: str) -> list[UserPermissionOverride]:
        return [o for (uid, _), o in self._items.items() if uid == user_id]

    async def upsert(self, override: UserPermissionOverride) -> UserPermissionOverride:
        self._items[(override.user_id, override.permission_id)] = override
        return override

    async def delete(self, user_id: str, permission_id: UUID) -> None:
        self._items.pop((user_id, permission_id), None)


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories and seeding helpers."""

    def __init__(self) -> None:
        self.profiles = FakeProfileRepository()
        self.permissions = FakePermissionRepository()
        self.user_roles = FakeUserRoleRepository()
        self.roles = FakeRoleRepository(self.user_roles)
        self.role_permissions = FakeRolePermissionRepository()
        self.user_permissions = FakeUserPermissionRepository()
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass

    def add_user(self, user_id: str, is_active: bool = True) -> Profile:
        profile = Profile(id=user_id, email=f"{user_id}@example.com", is_active=is_active)
        self.profiles.add(profile)
        return profile

    def add_permission(self, resource: str, action: str) -> Permission:
        permission = Permission(id=uuid4(), resource=resource, action=action)
        self.permissions.add(permission)
        return permission

    def add_role(self, name: str) -> Role:
        role = Role(id=uuid4(), name=name, description=name.title())
        self.roles.add_role(role)
        return role

    def grant(
        self,
        role: Role,
        permission: Permission,
        effect: PermissionEffect = PermissionEffect.ALLOW,
    ) -> None:
        self.role_permissions.add(
            RolePermission(role_id=role.id, permission_id=permission.id, effect=effect)
        )

    def assign(self, user_id: str, role: Role) -> None:
        self.user_roles._items[(user_id, role.id)] = UserRole(
            user_id=user_id, role_id=role.id, created_at=datetime.now(UTC)
        )

    def override(self, user_id: str, permission: Permission, effect: PermissionEffect) -> None:
        self.user_permissions._items[(user_id, permission.id)] = UserPermissionOverride(
            user_id=user_id,
            permission_id=permission.id,
            effect=effect,
            created_at=datetime.now(UTC),
            created_by="admin-1",
        )


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


@asynccontextmanager
async def unavailable_uow_factory() -> AsyncIterator[FakeUnitOfWork]:
    """Factory that fails like an unreachable database."""
    raise StoreUnavailable("Permission store unavailable: connection refused")
    yield FakeUnitOfWork()  # pragma: no cover


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_permission_resolver():
    """AsyncMock for PermissionResolver - allows by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.resolve.return_value = Decision(allowed=True)
    return mock
