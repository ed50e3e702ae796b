"""Scenario choice model.

One row per recorded choice. The table is append-only: rows are never
updated or deleted, and the autoincrement id fixes insertion order.
"""

from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import JSON, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

# Header row of the sheet view; position is significant, readers index by offset.
HEADER = (
    "Timestamp",
    "Date",
    "SessionID",
    "Round",
    "OptionA_ID",
    "OptionA_Text",
    "OptionB_ID",
    "OptionB_Text",
    "Chosen",
    "ChosenScenarioID",
    "Language",
)

# Attribute backing each header cell, same order as HEADER.
CELL_ATTRIBUTES = (
    "timestamp",
    "date",
    "session_id",
    "round",
    "option_a_id",
    "option_a_text",
    "option_b_id",
    "option_b_text",
    "chosen",
    "chosen_scenario_id",
    "language",
)

DATE_COLUMN = 1
CHOSEN_SCENARIO_COLUMN = 9


class ScenarioChoice(Base):
    __tablename__ = "scenario_choices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Client-supplied, stored as sent (string or number)
    timestamp: Mapped[Any] = mapped_column(JSON, nullable=True)
    date: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    session_id: Mapped[str] = mapped_column(String(100), nullable=False)
    round: Mapped[Any] = mapped_column(JSON, nullable=True)

    option_a_id: Mapped[str] = mapped_column(String(100), nullable=False)
    option_a_text: Mapped[str] = mapped_column(Text, nullable=False)
    option_b_id: Mapped[str] = mapped_column(String(100), nullable=False)
    option_b_text: Mapped[str] = mapped_column(Text, nullable=False)

    chosen: Mapped[str] = mapped_column(String(50), nullable=False)
    chosen_scenario_id: Mapped[str] = mapped_column(String(100), nullable=False)
    language: Mapped[str] = mapped_column(String(16), nullable=False)

    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    @classmethod
    def from_cells(cls, cells: Sequence[Any]) -> "ScenarioChoice":
        if len(cells) != len(HEADER):
            raise ValueError(f"expected {len(HEADER)} cells, got {len(cells)}")
        return cls(**dict(zip(CELL_ATTRIBUTES, cells)))

    def to_cells(self) -> list[Any]:
        return [getattr(self, attr) for attr in CELL_ATTRIBUTES]
