"""Initial schema - profiles and RBAC tables.

Revision ID: 001
Revises:
Create Date: 2025-03-04

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "rbac_permissions",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("resource", sa.String(100), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index(
        "ix_rbac_permissions_resource_action",
        "rbac_permissions",
        ["resource", "action"],
        unique=True,
    )

    op.create_table(
        "rbac_roles",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index("ix_rbac_roles_name", "rbac_roles", ["name"], unique=True)

    op.create_table(
        "rbac_role_permissions",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("rbac_roles.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "permission_id",
            sa.UUID(),
            sa.ForeignKey("rbac_permissions.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("effect", sa.String(10), nullable=False, server_default="allow"),
        sa.CheckConstraint("effect IN ('allow', 'deny')", name="ck_rbac_role_permissions_effect"),
    )

    op.create_table(
        "rbac_user_roles",
        sa.Column("user_id", sa.String(255), sa.ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("rbac_roles.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_rbac_user_roles_user_id", "rbac_user_roles", ["user_id"])

    op.create_table(
        "rbac_user_permissions",
        sa.Column("user_id", sa.String(255), sa.ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "permission_id",
            sa.UUID(),
            sa.ForeignKey("rbac_permissions.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("effect", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.CheckConstraint("effect IN ('allow', 'deny')", name="ck_rbac_user_permissions_effect"),
    )


def downgrade() -> None:
    op.drop_table("rbac_user_permissions")
    op.drop_table("rbac_user_roles")
    op.drop_table("rbac_role_permissions")
    op.drop_table("rbac_roles")
    op.drop_table("rbac_permissions")
    op.drop_table("profiles")
