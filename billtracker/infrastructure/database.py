"""
Database engine, session factory and transaction scopes.
"""

import os
from contextlib import contextmanager
from typing import Generator, Iterator, Optional

import structlog
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from billtracker.config import get_settings
from billtracker.core.transaction import TransactionScope

logger = structlog.get_logger(__name__)

Base = declarative_base()

_SCOPE_KEY = "billtracker.transaction_scope"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Build an engine; SQLite gets foreign keys and a shared in-memory pool."""
    # Some hosts still hand out the pre-SQLAlchemy-1.4 scheme
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url:
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, echo=echo, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_db(bind: Engine) -> None:
    """Create the SQLite directory (if any) and all tables."""
    # Register every table on Base.metadata
    from billtracker.domain.models import annotation, bill, event as event_model, user  # noqa: F401

    database = bind.url.database
    if bind.dialect.name == "sqlite" and database and database != ":memory:":
        directory = os.path.dirname(os.path.abspath(database))
        os.makedirs(directory, exist_ok=True)

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created/verified", url=bind.url.render_as_string(hide_password=True))


settings = get_settings()
engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def current_scope(db: Session) -> Optional[TransactionScope]:
    return db.info.get(_SCOPE_KEY)


@contextmanager
def atomic(db: Session) -> Iterator[TransactionScope]:
    """Run repository writes on ``db`` as one transaction.

    Repositories flush instead of committing while a scope is open. The
    outermost scope commits on a clean exit and rolls back if any repository
    call inside it failed. Nested scopes join the outer one.
    """
    outer = current_scope(db)
    if outer is not None:
        try:
            yield outer
        except Exception:
            outer.failed = True
            raise
        return

    scope = TransactionScope()
    db.info[_SCOPE_KEY] = scope
    try:
        yield scope
    except Exception:
        scope.failed = True
        raise
    finally:
        db.info.pop(_SCOPE_KEY, None)
        if scope.failed:
            db.rollback()
            logger.warning("Transaction rolled back")
        else:
            try:
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                scope.failed = True
                logger.exception("Transaction commit failed")
