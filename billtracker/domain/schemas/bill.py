"""Pydantic schemas for Bill.

``event`` and ``annotation`` are snapshots joined in by the repository at read
time; they are never written back. ``event_id`` 0 means uncategorized.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from billtracker.core.clock import local_now
from billtracker.domain.schemas.annotation import Annotation
from billtracker.domain.schemas.event import Event


class Bill(BaseModel):
    id: int = 0
    owner_id: int = 0
    event_id: int = 0
    description: str = ""
    amount: float = 0.0
    created_at: datetime = Field(default_factory=local_now)
    has_annotation: bool = False
    event: Event = Field(default_factory=Event)
    annotation: Annotation = Field(default_factory=Annotation)
