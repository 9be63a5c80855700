"""Auth service: registration, login and password changes with salted hashes."""

import re
from typing import Optional

import structlog
from passlib.context import CryptContext

from billtracker.config import get_settings
from billtracker.core.clock import local_now
from billtracker.domain.repositories.user_repository import UserRepository
from billtracker.domain.schemas.user import ROLE_USER, User

settings = get_settings()
pwd_context = CryptContext(schemes=settings.PASSWORD_SCHEMES, deprecated="auto")
logger = structlog.get_logger(__name__)

PHONE_PATTERN = re.compile(r"\d{11}")
USERNAME_LENGTH = (2, 20)
PASSWORD_LENGTH = (6, 32)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Not a hash passlib recognises (e.g. a legacy plaintext row)
        return False


def _length_ok(value: str, bounds: tuple) -> bool:
    low, high = bounds
    return low <= len(value) <= high


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def login(self, phone: str, password: str) -> Optional[User]:
        user = self.user_repo.query_by_phone(phone)
        if user is None:
            logger.info("Login failed", phone=phone, reason="unknown phone")
            return None

        try:
            verified, new_hash = pwd_context.verify_and_update(password, user.password)
        except ValueError:
            verified, new_hash = False, None
        if not verified:
            logger.info("Login failed", user_id=user.id, reason="password mismatch")
            return None

        if new_hash:
            user.password = new_hash
            if self.user_repo.save(user) is not None:
                logger.info("Password hash upgraded", user_id=user.id)

        logger.info("Login succeeded", user_id=user.id)
        return user

    def register(self, phone: str, username: str, password: str) -> Optional[User]:
        if not phone or not username or not password:
            logger.debug("Registration rejected", reason="empty field")
            return None
        if not PHONE_PATTERN.fullmatch(phone):
            logger.debug("Registration rejected", reason="phone must be 11 digits", phone=phone)
            return None
        if not _length_ok(username, USERNAME_LENGTH) or not _length_ok(password, PASSWORD_LENGTH):
            logger.debug("Registration rejected", reason="username or password length", phone=phone)
            return None

        if self.user_repo.query_by_phone(phone) is not None:
            logger.info("Registration rejected", reason="phone already registered", phone=phone)
            return None

        user = User(
            phone=phone,
            username=username,
            password=hash_password(password),
            role=ROLE_USER,
            balance=0.0,
            created_at=local_now(),
        )
        # A concurrent registration loses on the unique phone index and gets None
        saved = self.user_repo.save(user)
        if saved is not None:
            logger.info("User registered", user_id=saved.id, phone=phone)
        return saved

    def reset_password(self, user_id: int, old_password: str, new_password: str) -> bool:
        if user_id <= 0:
            return False
        if not new_password or new_password == old_password:
            logger.debug("Password reset rejected", user_id=user_id, reason="new password empty or unchanged")
            return False
        if not _length_ok(new_password, PASSWORD_LENGTH):
            logger.debug("Password reset rejected", user_id=user_id, reason="new password length")
            return False

        user = self.user_repo.find_by_id(user_id)
        if user is None or not verify_password(old_password, user.password):
            logger.info("Password reset rejected", user_id=user_id, reason="unknown user or wrong password")
            return False

        user.password = hash_password(new_password)
        if self.user_repo.save(user) is None:
            return False
        logger.info("Password reset", user_id=user_id)
        return True
