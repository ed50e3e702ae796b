from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from rfs_tracking import __version__
from rfs_tracking.config import settings
from rfs_tracking.database import engine
from rfs_tracking.dependencies import DbSession
from rfs_tracking.logging_config import configure_logging
from rfs_tracking.metrics import metrics_endpoint
from rfs_tracking.middleware.logging_middleware import RequestLoggingMiddleware
from rfs_tracking.models import Base
from rfs_tracking.routers import tracking

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Configure structured logging before anything else
    configure_logging()

    if settings.create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    log.info("tracking_api_started", database=engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        await engine.dispose()


app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(tracking.router)

# Prometheus metrics endpoint
app.get("/metrics")(metrics_endpoint)


@app.get("/health")
async def health_check(response: Response, db: DbSession):
    """Returns 200 when the database answers, 503 otherwise."""
    try:
        await db.execute(text("SELECT 1"))
        checks = {"database": {"status": "healthy"}}
        healthy = True
    except Exception as e:
        checks = {"database": {"status": "unhealthy", "error": str(e)}}
        healthy = False

    response.status_code = 200 if healthy else 503
    return {"status": "healthy" if healthy else "unhealthy", "checks": checks}
