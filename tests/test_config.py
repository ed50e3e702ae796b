"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from rfs_tracking.config import Settings


def test_top_scenarios_limit_defaults_to_ten():
    assert Settings().top_scenarios_limit == 10


@pytest.mark.parametrize("limit", [0, 11])
def test_top_scenarios_limit_is_capped(limit):
    with pytest.raises(ValidationError):
        Settings(top_scenarios_limit=limit)


def test_top_scenarios_limit_from_env(monkeypatch):
    monkeypatch.setenv("TOP_SCENARIOS_LIMIT", "5")
    assert Settings().top_scenarios_limit == 5
