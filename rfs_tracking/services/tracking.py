"""Ingest and query handlers for scenario choices.

Each handler returns a Result; failures of any kind (bad JSON, schema
violations, database errors) come back as HandlerError, never as raised
exceptions.
"""

import time
from typing import Optional

import structlog
from pydantic import ValidationError

from rfs_tracking.config import settings
from rfs_tracking.metrics import aggregation_duration, choices_recorded, tracking_queries
from rfs_tracking.schemas.choice import ChoiceEvent, IngestResponse, StatusResponse
from rfs_tracking.schemas.stats import DailyStatsResponse, TopScenariosResponse
from rfs_tracking.services.dates import today_string
from rfs_tracking.services.result import HandlerError, Ok, Result
from rfs_tracking.services.sheet import ChoiceSheet
from rfs_tracking.services.top_scenarios import daily_stats, top_scenarios

log = structlog.get_logger(__name__)

GET_TOP_ACTION = "getTop"


async def record_choice(sheet: ChoiceSheet, body: bytes) -> Result[IngestResponse]:
    """Parse one choice event from a raw request body and append it as a row."""
    try:
        event = ChoiceEvent.model_validate_json(body)
    except ValidationError as exc:
        choices_recorded.labels(outcome="invalid").inc()
        log.warning("choice_ingest_failed", reason="invalid", errors=exc.error_count())
        return HandlerError.from_exception(exc)

    try:
        await sheet.append_row(event.to_cells())
    except Exception as exc:
        choices_recorded.labels(outcome="error").inc()
        log.error(
            "choice_ingest_failed",
            reason="append",
            error=str(exc),
            session_id=event.session_id,
        )
        return HandlerError.from_exception(exc)

    choices_recorded.labels(outcome="recorded").inc()
    log.info(
        "choice_recorded",
        session_id=event.session_id,
        round=event.round,
        chosen_scenario_id=str(event.chosen_scenario_id),
    )
    return Ok(IngestResponse())


async def get_top_scenarios(
    sheet: ChoiceSheet, limit: Optional[int] = None
) -> Result[TopScenariosResponse]:
    """Today's most-chosen scenarios from a full scan of the sheet."""
    today = today_string()
    start = time.perf_counter()
    try:
        values = await sheet.get_values()
        result = top_scenarios(
            values, today, limit if limit is not None else settings.top_scenarios_limit
        )
    except Exception as exc:
        log.error("top_scenarios_failed", error=str(exc))
        return HandlerError.from_exception(exc)
    aggregation_duration.observe(time.perf_counter() - start)
    log.info(
        "top_scenarios_computed",
        date=today,
        rows=len(values) - 1,
        total_selections=result.total_selections,
    )
    return Ok(result)


async def query(sheet: ChoiceSheet, action: Optional[str]) -> Result:
    """Dispatch a read request: ``getTop`` aggregates, anything else reports status."""
    if action == GET_TOP_ACTION:
        result = await get_top_scenarios(sheet)
        outcome = "ok" if isinstance(result, Ok) else "error"
        tracking_queries.labels(action=GET_TOP_ACTION, outcome=outcome).inc()
        return result

    tracking_queries.labels(action="status", outcome="ok").inc()
    return Ok(StatusResponse(message=settings.app_name))


async def get_daily_stats(sheet: ChoiceSheet) -> Result[DailyStatsResponse]:
    try:
        values = await sheet.get_values()
    except Exception as exc:
        log.error("daily_stats_failed", error=str(exc))
        return HandlerError.from_exception(exc)
    return Ok(daily_stats(values))
