"""Seed default roles and permissions.

Revision ID: 002
Revises: 001
Create Date: 2025-03-05

"""

from collections.abc import Sequence

from alembic import op

from crowdhub.infrastructure.persistence.seed import DEFAULT_PERMISSIONS, DEFAULT_ROLES

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    for resource, action, description in DEFAULT_PERMISSIONS:
        op.execute(
            "INSERT INTO rbac_permissions (resource, action, description) "
            f"VALUES ('{resource}', '{action}', '{description}')"
        )
    for name, description, rules in DEFAULT_ROLES:
        op.execute(
            f"INSERT INTO rbac_roles (name, description) VALUES ('{name}', '{description}')"
        )
        for resource, action, effect in rules:
            op.execute(f"""
                INSERT INTO rbac_role_permissions (role_id, permission_id, effect)
                SELECT r.id, p.id, '{effect}' FROM rbac_roles r, rbac_permissions p
                WHERE r.name = '{name}' AND p.resource = '{resource}' AND p.action = '{action}'
            """)


def downgrade() -> None:
    names = ", ".join(f"'{name}'" for name, _, _ in DEFAULT_ROLES)
    op.execute(f"DELETE FROM rbac_roles WHERE name IN ({names})")
    for resource, action, _ in DEFAULT_PERMISSIONS:
        op.execute(
            f"DELETE FROM rbac_permissions WHERE resource = '{resource}' AND action = '{action}'"
        )
