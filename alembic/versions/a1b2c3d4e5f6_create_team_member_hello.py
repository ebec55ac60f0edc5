"""create_team_member_hello

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

팀(team), 회원(member), hello 테이블 생성.
회원은 팀에 선택적으로 소속 (member.team_id nullable).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "team",
        sa.Column("team_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_table(
        "member",
        sa.Column("member_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("age", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("team_id", sa.Integer(), sa.ForeignKey("team.team_id"), nullable=True),
    )
    op.create_index("ix_member_team_id", "member", ["team_id"])
    op.create_table(
        "hello",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    )


def downgrade() -> None:
    op.drop_table("hello")
    op.drop_index("ix_member_team_id", table_name="member")
    op.drop_table("member")
    op.drop_table("team")
