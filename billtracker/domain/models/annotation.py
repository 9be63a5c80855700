"""Annotation domain model: admin notes kept per bill, newest row is live."""

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey

from billtracker.infrastructure.database import Base


class AnnotationModel(Base):
    __tablename__ = "annotations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bill_id = Column(Integer, ForeignKey("bills.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    authorid = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Annotation {self.id} on bill {self.bill_id}>"
