"""Initial schema: users, projects, bookings, contacts

Revision ID: 001
Revises:
Create Date: 2025-01-15 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _string(length: int) -> sqlmodel.sql.sqltypes.AutoString:
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("hashed_password", _string(255), nullable=False),
        sa.Column("name", _string(100), nullable=False),
        sa.Column("role", _string(20), nullable=False, server_default="admin"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_name", _string(200), nullable=False),
        sa.Column("project_description", sa.Text(), nullable=False),
        sa.Column("project_goals", sa.JSON(), nullable=False),
        sa.Column("service_type", _string(20), nullable=False),
        sa.Column("industry", _string(200), nullable=False),
        sa.Column("target_audience", sa.Text(), nullable=False),
        sa.Column("budget", _string(100), nullable=False),
        sa.Column("timeline", _string(20), nullable=False),
        sa.Column("name", _string(200), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("company_name", _string(200), nullable=False),
        sa.Column("company_website", _string(500), nullable=True),
        sa.Column("project_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("payment_schedule", sa.JSON(), nullable=False),
        sa.Column("milestones", sa.JSON(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("design_choices", sa.JSON(), nullable=False),
        sa.Column("content_status", sa.JSON(), nullable=False),
        sa.Column("hosting", sa.JSON(), nullable=False),
        sa.Column("domain", sa.JSON(), nullable=False),
        sa.Column("referred_by", sa.JSON(), nullable=False),
        sa.Column("additional_services", sa.JSON(), nullable=False),
        sa.Column("workflow_stage", _string(20), nullable=False, server_default="discovery"),
        sa.Column("status", _string(20), nullable=False, server_default="new"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_project_name", "projects", ["project_name"])
    op.create_index("ix_projects_email", "projects", ["email"])
    op.create_index("ix_projects_status", "projects", ["status"])
    op.create_index("ix_projects_created_at", "projects", ["created_at"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(200), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("company", _string(200), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", _string(5), nullable=False),
        sa.Column("timezone", _string(64), nullable=False),
        sa.Column("call_type", _string(10), nullable=False),
        sa.Column("project_type", _string(100), nullable=False),
        sa.Column("additional_info", sa.Text(), nullable=True),
        sa.Column("status", _string(20), nullable=False, server_default="scheduled"),
        sa.Column("meeting_link", _string(500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bookings_email", "bookings", ["email"])
    op.create_index("ix_bookings_date", "bookings", ["date"])

    op.create_table(
        "contacts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(200), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("subject", _string(300), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", _string(20), nullable=False, server_default="new"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contacts_created_at", "contacts", ["created_at"])


def downgrade() -> None:
    op.drop_table("contacts")
    op.drop_table("bookings")
    op.drop_table("projects")
    op.drop_table("users")
