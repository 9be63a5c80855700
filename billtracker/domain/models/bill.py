"""Bill domain model: maps to the 'bills' table."""

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey

from billtracker.infrastructure.database import Base


class BillModel(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=True, index=True)  # NULL = uncategorized
    description = Column(String(500), nullable=False, default="")
    amount = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, index=True)
    has_annotation = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Bill {self.id} - {self.amount}>"
