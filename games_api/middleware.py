"""HTTP middleware: CORS headers and per-request logging."""

import logging
import time
from typing import Dict

from fastapi import FastAPI, Request, Response

logger = logging.getLogger("app.access")

CORS_ALLOW_METHODS = "GET,POST,OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"


def cors_headers(allow_origin: str) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


def add_cors(app: FastAPI, allow_origin: str) -> None:
    """Set CORS headers on every response and answer OPTIONS preflights."""
    headers = cors_headers(allow_origin)

    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)
        response = await call_next(request)
        response.headers.update(headers)
        return response


def add_request_logging(app: FastAPI) -> None:
    """Log method, path and elapsed time once the handler has finished.

    Register this last so it wraps the other middleware.
    """

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s %.3fms", request.method, request.url.path, elapsed_ms)
        return response
