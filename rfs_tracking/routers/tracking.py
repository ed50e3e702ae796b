"""Scenario choice tracking endpoints.

POST /api/v1/tracking             -- record one choice (raw JSON body)
GET  /api/v1/tracking             -- status, or today's top scenarios with action=getTop
GET  /api/v1/tracking/daily-stats -- row counts per stored date

All three answer 200; failures are reported as {"success": false, "error": ...}.
GET responses are JSONP-wrapped when a callback is given.
"""

from typing import Optional

from fastapi import APIRouter, Request, Response

from rfs_tracking.dependencies import Sheet
from rfs_tracking.formatters import render
from rfs_tracking.services import tracking

router = APIRouter(prefix="/api/v1/tracking", tags=["tracking"])


@router.post("")
async def ingest_choice(request: Request, sheet: Sheet) -> Response:
    body = await request.body()
    result = await tracking.record_choice(sheet, body)
    return render(result.to_payload())


@router.get("")
async def query_tracking(
    sheet: Sheet,
    action: Optional[str] = None,
    callback: Optional[str] = None,
) -> Response:
    result = await tracking.query(sheet, action)
    return render(result.to_payload(), callback)


@router.get("/daily-stats")
async def daily_stats(sheet: Sheet, callback: Optional[str] = None) -> Response:
    result = await tracking.get_daily_stats(sheet)
    return render(result.to_payload(), callback)
