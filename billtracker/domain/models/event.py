"""Event (bill category) domain model: maps to the 'events' table."""

from sqlalchemy import Column, Integer, String, DateTime

from billtracker.infrastructure.database import Base


class EventModel(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    status = Column(Integer, nullable=False, default=0)  # 0 available, 1 frozen
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Event {self.name} - {self.status}>"
