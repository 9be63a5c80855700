"""
SQLAlchemy implementation of the Base Repository.
"""

from functools import wraps
from typing import Any, Callable, ContextManager, Dict, Generic, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from billtracker.core.exceptions import translate_storage_error
from billtracker.core.transaction import TransactionScope
from billtracker.infrastructure.database import Base, atomic, current_scope

logger = structlog.get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
EntityType = TypeVar("EntityType", bound=BaseModel)


def storage_guard(empty: Callable[[], Any] = lambda: None):
    """Keep storage exceptions inside the repository.

    The session is rolled back (failing any enclosing atomic() scope), the
    error is logged with its taxonomy code and ``empty()`` is returned.
    """
    def decorator(method):
        @wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except SQLAlchemyError as exc:
                self._recover()
                error = translate_storage_error(
                    exc, repository=type(self).__name__, operation=method.__name__
                )
                logger.warning("Storage operation failed", **error.to_dict())
                return empty()
        return wrapper
    return decorator


class SQLAlchemyRepository(Generic[ModelType, EntityType]):
    """Generic upsert-by-id repository mapping SQLAlchemy rows to pydantic entities."""

    def __init__(self, db: Session, model: Type[ModelType], entity: Type[EntityType]):
        self.db = db
        self.model = model
        self.entity = entity

    def atomic(self) -> ContextManager[TransactionScope]:
        return atomic(self.db)

    def _commit(self) -> None:
        # Inside atomic() the outermost scope owns the commit
        if current_scope(self.db) is None:
            self.db.commit()
        else:
            self.db.flush()

    def _recover(self) -> None:
        self.db.rollback()
        scope = current_scope(self.db)
        if scope is not None:
            scope.failed = True

    def _to_entity(self, row: ModelType) -> EntityType:
        return self.entity.model_validate(row)

    def _to_columns(self, entity: EntityType) -> Dict[str, Any]:
        columns = {c.key for c in self.model.__table__.columns} - {"id"}
        return entity.model_dump(include=columns)

    @storage_guard()
    def find_by_id(self, id: int) -> Optional[EntityType]:
        if id <= 0:
            return None
        row = self.db.get(self.model, id)
        return self._to_entity(row) if row is not None else None

    @storage_guard()
    def save(self, entity: EntityType) -> Optional[EntityType]:
        values = self._to_columns(entity)

        if entity.id == 0:
            row = self.model(**values)
            self.db.add(row)
            self.db.flush()
            new_id = row.id
            self._commit()
            entity.id = new_id
            return entity

        row = self.db.get(self.model, entity.id)
        if row is None:
            logger.info("Update skipped, row not found", table=self.model.__tablename__, id=entity.id)
            return None
        for field, value in values.items():
            setattr(row, field, value)
        self._commit()
        return entity
