"""create profiles and project submissions

Revision ID: 3c1f0b7a9d21
Revises:
Create Date: 2025-02-20 10:14:32.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0b7a9d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.Column("study_program", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"])
    op.create_index("ix_profiles_email", "profiles", ["email"], unique=True)
    op.create_index("ix_profiles_username", "profiles", ["username"], unique=True)

    op.create_table(
        "projects_submissions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("project_name", sa.String(length=255), nullable=False),
        sa.Column("class", sa.String(length=50), nullable=False),
        sa.Column("group_class", sa.String(length=100), nullable=False),
        sa.Column("course", sa.String(length=255), nullable=False),
        sa.Column("lecturer", sa.String(length=255), nullable=False),
        sa.Column("grade", sa.String(length=20), nullable=True),
        sa.Column("program_study", sa.String(length=255), nullable=False),
        sa.Column("document_url", sa.String(length=1024), nullable=True),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_projects_submissions_id", "projects_submissions", ["id"])
    op.create_index("ix_projects_submissions_user_id", "projects_submissions", ["user_id"])
    op.create_index("ix_projects_submissions_program_study", "projects_submissions", ["program_study"])
    op.create_index("ix_projects_submissions_status", "projects_submissions", ["status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("projects_submissions")
    op.drop_table("profiles")
