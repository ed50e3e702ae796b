"""Prometheus metrics for the tracking API."""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

choices_recorded = Counter(
    "rfs_choices_recorded_total",
    "Scenario choices received by the ingest endpoint",
    ["outcome"],
)
tracking_queries = Counter(
    "rfs_tracking_queries_total",
    "Read requests served by the query endpoint",
    ["action", "outcome"],
)
aggregation_duration = Histogram(
    "rfs_aggregation_duration_seconds",
    "Full-sheet scan and aggregation latency",
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0],
)


async def metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
