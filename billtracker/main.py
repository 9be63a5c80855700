"""Billtracker bootstrap: logging, schema and default admin."""

from typing import Optional

import structlog
from sqlalchemy.orm import sessionmaker

from billtracker.application.services.auth_service import hash_password
from billtracker.config import Settings, get_settings
from billtracker.core.clock import local_now
from billtracker.core.logging import configure_logging
from billtracker.domain.schemas.user import ROLE_ADMIN, User
from billtracker.infrastructure import database
from billtracker.infrastructure.database import create_db_engine, init_db
from billtracker.interfaces.deps import get_user_repository

logger = structlog.get_logger(__name__)


def ensure_default_admin(session_factory: sessionmaker, settings: Settings) -> Optional[User]:
    """Create the configured admin account unless its phone is already taken."""
    db = session_factory()
    try:
        users = get_user_repository(db)
        admin = users.query_by_phone(settings.DEFAULT_ADMIN_PHONE)
        if admin is not None:
            return admin

        admin = users.save(User(
            phone=settings.DEFAULT_ADMIN_PHONE,
            username=settings.DEFAULT_ADMIN_USERNAME,
            password=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
            role=ROLE_ADMIN,
            created_at=local_now(),
        ))
        if admin is not None:
            logger.info("Default admin user created", phone=settings.DEFAULT_ADMIN_PHONE)
        return admin
    finally:
        db.close()


def bootstrap(settings: Optional[Settings] = None) -> sessionmaker:
    """Prepare storage and return the session factory to build services from."""
    settings = settings or get_settings()
    configure_logging(settings)
    logger.info("Starting billtracker...", env=settings.ENVIRONMENT)

    if settings.DATABASE_URL == get_settings().DATABASE_URL:
        engine, session_factory = database.engine, database.SessionLocal
    else:
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        session_factory = sessionmaker(autoflush=False, bind=engine)

    init_db(engine)
    ensure_default_admin(session_factory, settings)
    return session_factory
