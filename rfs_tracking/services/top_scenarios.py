"""Read-side aggregations over the choice sheet.

Both functions take the full ``get_values()`` output (header first) and do
a single linear scan; nothing is cached between queries.
"""

from typing import Any

from rfs_tracking.models.scenario_choice import CHOSEN_SCENARIO_COLUMN, DATE_COLUMN
from rfs_tracking.schemas.stats import (
    DailyStatsResponse,
    ScenarioCount,
    TopScenariosResponse,
)
from rfs_tracking.services.dates import normalize_date

DEFAULT_TOP_LIMIT = 10


def count_today(values: list[list[Any]], today: str) -> tuple[dict[str, int], int]:
    """Count winning scenario ids among rows dated ``today``.

    Returns (counts keyed by scenario id, total selections). Rows with an
    empty scenario id are ignored. Dict order is first appearance.
    """
    counts: dict[str, int] = {}
    total = 0
    for row in values[1:]:
        chosen_id = row[CHOSEN_SCENARIO_COLUMN]
        if normalize_date(row[DATE_COLUMN]) != today or not chosen_id:
            continue
        key = str(chosen_id)
        counts[key] = counts.get(key, 0) + 1
        total += 1
    return counts, total


def top_scenarios(
    values: list[list[Any]], today: str, limit: int = DEFAULT_TOP_LIMIT
) -> TopScenariosResponse:
    """Most-chosen scenarios for ``today``, count descending.

    Ties keep first-appearance order (sorted() is stable).
    """
    counts, total = count_today(values, today)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return TopScenariosResponse(
        date=today,
        total_selections=total,
        top_scenarios=[
            ScenarioCount(scenario_id=scenario_id, count=count)
            for scenario_id, count in ranked[:limit]
        ],
    )


def daily_stats(values: list[list[Any]]) -> DailyStatsResponse:
    """Row count per raw date cell. Unlike top_scenarios, dates are not normalized."""
    per_day: dict[str, int] = {}
    for row in values[1:]:
        raw = row[DATE_COLUMN]
        if not raw:
            continue
        key = str(raw)
        per_day[key] = per_day.get(key, 0) + 1
    return DailyStatsResponse(daily_stats=per_day)
