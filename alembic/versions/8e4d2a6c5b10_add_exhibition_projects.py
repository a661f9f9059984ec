"""add exhibition projects catalogue

Revision ID: 8e4d2a6c5b10
Revises: 3c1f0b7a9d21
Create Date: 2025-02-24 16:02:11.540917

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8e4d2a6c5b10'
down_revision: Union[str, Sequence[str], None] = '3c1f0b7a9d21'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("project_name", sa.String(length=255), nullable=False),
        sa.Column("group_name", sa.String(length=255), nullable=False),
        sa.Column("members", sa.JSON(), nullable=False),
        sa.Column("course_name", sa.String(length=255), nullable=False),
        sa.Column("lecturer", sa.String(length=255), nullable=False),
        sa.Column("class_name", sa.String(length=50), nullable=False),
        sa.Column("program", sa.String(length=255), nullable=False),
        sa.Column("batch", sa.String(length=10), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
    )
    op.create_index("ix_projects_id", "projects", ["id"])
    op.create_index("ix_projects_program", "projects", ["program"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("projects")
