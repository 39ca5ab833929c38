"""HTTP route handlers (FastAPI APIRouter).

Defines `/api/health`, `/api/games` and `/api/contact`. The catalog comes
from the `get_catalog` dependency in `catalog`.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List, Optional
import logging

from pydantic import TypeAdapter, ValidationError

from .catalog import Catalog, get_catalog
from .models import ContactMessage, ContactReceipt, Game, HealthStatus, utc_timestamp

logger = logging.getLogger("app.routes")

router = APIRouter(prefix="/api")

HEALTH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]

_contact_adapter = TypeAdapter(Optional[ContactMessage])


@router.api_route(
    "/health",
    methods=HEALTH_METHODS,
    response_model=HealthStatus,
)
async def health():
    """Liveness check; answers the same for every standard method."""
    return HealthStatus(ok=True)


@router.get("/games", response_model=List[Game])
async def list_games(catalog: Catalog = Depends(get_catalog)):
    return list(catalog)


@router.post("/contact", status_code=201, response_model=ContactReceipt)
async def contact(request: Request):
    body = await request.body()
    try:
        message = _contact_adapter.validate_json(body)
    except ValidationError as e:
        logger.warning("Rejected contact message: %s", e.errors()[0]["msg"])
        raise HTTPException(status_code=400, detail="bad request")
    if message is None:
        message = ContactMessage()

    logger.info(
        "Contact message received: name=%r email=%r subject=%r message=%r",
        message.name,
        message.email,
        message.subject,
        message.message,
    )
    # TODO: deliver contact messages by email (SMTP or a provider)
    return ContactReceipt(received=True, at=utc_timestamp())
