"""Entrypoint for `python -m rfs_tracking`.

Host and port come from HOST / PORT (see rfs_tracking.config).
"""

import uvicorn

from rfs_tracking.config import settings

uvicorn.run("rfs_tracking.main:app", host=settings.host, port=settings.port)
