"""Pydantic schema for the ping endpoint."""

from pydantic import BaseModel

from phasein.core.horizon import DAYS


class PingResponse(BaseModel):
    message: str
    horizonDays: int = DAYS
