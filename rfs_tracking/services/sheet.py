"""Spreadsheet-style view over the scenario_choices table.

Handlers see the store the way the tracking frontend's sheet looks: row 0
is the fixed header, every following row is a list of 11 cells in column
order, oldest first.
"""

from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rfs_tracking.models.scenario_choice import HEADER, ScenarioChoice


class ChoiceSheet:
    """Append-only sheet bound to one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def append_row(self, cells: Sequence[Any]) -> None:
        self.session.add(ScenarioChoice.from_cells(cells))
        await self.session.commit()

    async def get_values(self) -> list[list[Any]]:
        """Return the header row followed by every data row in insertion order."""
        result = await self.session.execute(
            select(ScenarioChoice).order_by(ScenarioChoice.id)
        )
        rows = [choice.to_cells() for choice in result.scalars().all()]
        return [list(HEADER), *rows]
