from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rfs_tracking.database import get_db
from rfs_tracking.services.sheet import ChoiceSheet

DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_sheet(db: DbSession) -> AsyncIterator[ChoiceSheet]:
    """Sheet over the request's session; get_db closes it afterwards."""
    yield ChoiceSheet(db)


Sheet = Annotated[ChoiceSheet, Depends(get_sheet)]
