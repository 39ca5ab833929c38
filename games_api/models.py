"""Pydantic models for the catalog and the contact form."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"


class Game(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable slug-like identifier")
    title: str = Field(..., min_length=1, description="Display name")
    stores: Dict[str, str] = Field(
        default_factory=dict, description="Store name to storefront URL"
    )
    trailer: Optional[str] = Field(
        None, description="Video identifier, null when there is no trailer"
    )
    platforms: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    images: Dict[str, str] = Field(
        default_factory=dict, description="Image role to URL, URL may be empty"
    )
    description: str = ""


class ContactMessage(BaseModel):
    """Contact form submission. Missing fields decode to empty strings."""

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class ContactReceipt(BaseModel):
    received: bool = True
    at: str = Field(..., description="RFC 3339 UTC time the message was received")


class HealthStatus(BaseModel):
    ok: bool = True


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format `now` (default: current time) as an RFC 3339 UTC timestamp."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(RFC3339_UTC)
