"""Pydantic schemas for Event (bill category)."""

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, Field

from billtracker.core.clock import local_now


class EventStatus(IntEnum):
    AVAILABLE = 0
    FROZEN = 1


class Event(BaseModel):
    id: int = 0
    name: str = ""
    status: EventStatus = EventStatus.AVAILABLE
    created_at: datetime = Field(default_factory=local_now)

    model_config = {"from_attributes": True}
