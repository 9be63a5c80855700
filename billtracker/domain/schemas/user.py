"""Pydantic schemas for User."""

from datetime import datetime

from pydantic import BaseModel, Field

from billtracker.core.clock import local_now

ROLE_USER = "user"
ROLE_ADMIN = "admin"


class User(BaseModel):
    id: int = 0
    phone: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)  # salted hash
    role: str = ROLE_USER
    balance: float = 0.0
    created_at: datetime = Field(default_factory=local_now)

    model_config = {"from_attributes": True}

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
