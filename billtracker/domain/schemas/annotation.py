"""Pydantic schemas for Annotation."""

from datetime import datetime

from pydantic import BaseModel, Field

from billtracker.core.clock import local_now


class Annotation(BaseModel):
    id: int = 0
    bill_id: int = 0
    content: str = ""
    authorid: int = 0
    created_at: datetime = Field(default_factory=local_now)

    model_config = {"from_attributes": True}
