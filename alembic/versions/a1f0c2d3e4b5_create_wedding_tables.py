"""create wedding, wedding member and attendee tables

Revision ID: a1f0c2d3e4b5
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1f0c2d3e4b5"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "weddings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(32), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("code", name="uq_weddings_code"),
    )
    op.create_table(
        "wedding_members",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("relation", sa.String(100), nullable=True),
        sa.Column("photo_paths", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "wedding_attendees",
        sa.Column("wedding_id", sa.Integer(), sa.ForeignKey("weddings.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("member_id", sa.Integer(), sa.ForeignKey("wedding_members.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("ix_wedding_attendees_member_id", "wedding_attendees", ["member_id"])


def downgrade() -> None:
    op.drop_index("ix_wedding_attendees_member_id", table_name="wedding_attendees")
    op.drop_table("wedding_attendees")
    op.drop_table("wedding_members")
    op.drop_table("weddings")
