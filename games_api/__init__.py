"""Application entrypoint.

This file is intentionally small: configuration, the catalog lifecycle,
middleware, and HTTP handlers live in their own modules.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from . import routes
from .catalog import lifespan
from .config import Settings
from .middleware import add_cors, add_request_logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("app")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(title="Games API", lifespan=lifespan, redirect_slashes=False)
    app.state.settings = settings
    app.include_router(routes.router)

    # Later middleware wraps earlier, so request logging sees preflights too
    add_cors(app, settings.allow_origin)
    add_request_logging(app)
    return app


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
