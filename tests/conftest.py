"""Shared fixtures: an in-memory sheet stands in for the database."""

import pytest
from fastapi.testclient import TestClient

from rfs_tracking.dependencies import get_sheet
from rfs_tracking.main import app
from rfs_tracking.models.scenario_choice import HEADER

TODAY = "2026-10-18"
YESTERDAY = "2026-10-17"


def make_row(date, scenario_id, session_id="s-1", round_=1):
    """Build an 11-cell sheet row with the given date and winning scenario."""
    return [
        "2026-10-18T09:00:00.000Z",
        date,
        session_id,
        round_,
        "A1",
        "Option A",
        "B1",
        "Option B",
        "A",
        scenario_id,
        "de",
    ]


class FakeSheet:
    """List-backed sheet with the same interface as ChoiceSheet."""

    def __init__(self, rows=None, error=None):
        self.values = [list(HEADER), *(rows or [])]
        self.error = error

    async def append_row(self, cells):
        if self.error:
            raise self.error
        self.values.append(list(cells))

    async def get_values(self):
        if self.error:
            raise self.error
        return [list(row) for row in self.values]


@pytest.fixture
def sheet():
    return FakeSheet()


@pytest.fixture
def client(sheet):
    """Test client whose requests all see the ``sheet`` fixture."""
    app.dependency_overrides[get_sheet] = lambda: sheet
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def pinned_today(monkeypatch):
    monkeypatch.setattr("rfs_tracking.services.tracking.today_string", lambda: TODAY)
    return TODAY
