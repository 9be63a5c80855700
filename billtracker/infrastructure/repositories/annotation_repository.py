"""
SQLAlchemy Implementation of Annotation Repository.
"""

from typing import List

from sqlalchemy.orm import Session

from billtracker.domain.models.annotation import AnnotationModel
from billtracker.domain.repositories.annotation_repository import AnnotationRepository
from billtracker.domain.schemas.annotation import Annotation
from billtracker.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


class SQLAlchemyAnnotationRepository(SQLAlchemyRepository[AnnotationModel, Annotation], AnnotationRepository):
    """Annotation repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, AnnotationModel, Annotation)

    @storage_guard(list)
    def find_by_bill_id(self, bill_id: int) -> List[Annotation]:
        rows = (
            self.db.query(AnnotationModel)
            .filter(AnnotationModel.bill_id == bill_id)
            .order_by(AnnotationModel.created_at.desc(), AnnotationModel.id.desc())
            .all()
        )
        return [self._to_entity(row) for row in rows]

    @storage_guard(list)
    def find_by_author_id(self, author_id: int) -> List[Annotation]:
        rows = (
            self.db.query(AnnotationModel)
            .filter(AnnotationModel.authorid == author_id)
            .order_by(AnnotationModel.created_at.desc(), AnnotationModel.id.desc())
            .all()
        )
        return [self._to_entity(row) for row in rows]
