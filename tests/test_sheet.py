"""Tests for the SQL-backed ChoiceSheet and the ingest schema."""

import asyncio

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from rfs_tracking.models import HEADER, Base, ScenarioChoice
from rfs_tracking.schemas.choice import ChoiceEvent
from rfs_tracking.services.sheet import ChoiceSheet

from tests.conftest import TODAY, make_row


def _run_with_sheet(db_path, scenario):
    async def runner():
        engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(engine, expire_on_commit=False)
        try:
            return await scenario(factory)
        finally:
            await engine.dispose()

    return asyncio.run(runner())


def test_sheet_appends_and_reads_back_in_order(tmp_path):
    first = make_row(TODAY, "S1", round_=1)
    second = make_row(TODAY, "S2", session_id="s-2", round_="2")
    first[0] = 1760781600000  # numeric timestamps are kept as numbers

    async def scenario(factory):
        async with factory() as session:
            sheet = ChoiceSheet(session)
            await sheet.append_row(first)
            await sheet.append_row(second)
        async with factory() as session:
            return await ChoiceSheet(session).get_values()

    values = _run_with_sheet(tmp_path / "sheet.db", scenario)

    assert values[0] == list(HEADER)
    assert values[1:] == [first, second]


def test_empty_sheet_is_header_only(tmp_path):
    async def scenario(factory):
        async with factory() as session:
            return await ChoiceSheet(session).get_values()

    assert _run_with_sheet(tmp_path / "empty.db", scenario) == [list(HEADER)]


def test_from_cells_requires_every_column():
    with pytest.raises(ValueError):
        ScenarioChoice.from_cells(["only", "two"])


def test_choice_event_to_cells():
    event = ChoiceEvent.model_validate(
        {
            "timestamp": 1760781600000,
            "date": TODAY,
            "sessionId": "sess",
            "round": "1",
            "optionA_id": 3,
            "optionA_textDE": "a",
            "optionB_id": "4",
            "optionB_textDE": "b",
            "chosen": "B",
            "chosenScenarioId": "4",
            "language": "en",
        }
    )
    assert event.to_cells() == [
        1760781600000, TODAY, "sess", "1", "3", "a", "4", "b", "B", "4", "en"
    ]


def test_choice_event_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        ChoiceEvent.model_validate_json('{"date": "2026-10-18", "bogus": 1}')
