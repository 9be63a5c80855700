"""
Error taxonomy for the bill-tracking core.

Repositories translate storage failures into these classes, log them and hand
an empty result back to the service layer. No AppError crosses the service
boundary.
"""

from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ConflictException(AppError):
    """Unique or foreign key constraint violated."""
    def __init__(self, message: str = "Constraint violation", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class StorageError(AppError):
    """Any other failure of the storage backend."""
    def __init__(self, message: str = "Storage failure", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


def translate_storage_error(exc: SQLAlchemyError, **details: Any) -> AppError:
    """Map a SQLAlchemy exception onto the application taxonomy."""
    if isinstance(exc, IntegrityError):
        return ConflictException(str(exc.orig), details)
    if isinstance(exc, (NoResultFound, StaleDataError)):
        return EntityNotFoundException(str(exc), details)
    return StorageError(str(exc), details)
