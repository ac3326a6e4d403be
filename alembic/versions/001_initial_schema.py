"""Initial schema - chat_override and permission_override.

Revision ID: 001
Revises:
Create Date: 2026-10-19

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
        "chat_override",
        sa.Column("user_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("prefix", sa.Text(), nullable=True),
        sa.Column("suffix", sa.Text(), nullable=True),
        sa.Column("color", sa.Text(), nullable=True),
    )

    op.create_table(
        "permission_override",
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("chat_override.user_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("negated", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("position", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_permission_override_user_position",
        "permission_override",
        ["user_id", "position"],
    )


def downgrade() -> None:
    op.drop_index("ix_permission_override_user_position", table_name="permission_override")
    op.drop_table("permission_override")
    op.drop_table("chat_override")
