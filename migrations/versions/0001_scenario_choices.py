"""Scenario choices table

Revision ID: 3c1d9e7a2b40
Revises:
Create Date: 2026-10-18 10:15:00.000000

Append-only log of scenario choices, one row per recorded choice.
Column order mirrors the sheet header (Timestamp .. Language).
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "3c1d9e7a2b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "scenario_choices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("timestamp", sa.JSON(), nullable=True),
        sa.Column("date", sa.String(64), nullable=False),
        sa.Column("session_id", sa.String(100), nullable=False),
        sa.Column("round", sa.JSON(), nullable=True),
        sa.Column("option_a_id", sa.String(100), nullable=False),
        sa.Column("option_a_text", sa.Text(), nullable=False),
        sa.Column("option_b_id", sa.String(100), nullable=False),
        sa.Column("option_b_text", sa.Text(), nullable=False),
        sa.Column("chosen", sa.String(50), nullable=False),
        sa.Column("chosen_scenario_id", sa.String(100), nullable=False),
        sa.Column("language", sa.String(16), nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True),
                  server_default=sa.func.now(), nullable=False),
    )
    op.create_index(
        "ix_scenario_choices_date",
        "scenario_choices",
        ["date"],
    )


def downgrade() -> None:
    op.drop_index("ix_scenario_choices_date", table_name="scenario_choices")
    op.drop_table("scenario_choices")
