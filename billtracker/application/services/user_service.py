"""User service: profile lookups and balance updates."""

from typing import List, Optional

import structlog

from billtracker.domain.repositories.user_repository import UserRepository
from billtracker.domain.schemas.user import User

logger = structlog.get_logger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def get_user(self, user_id: int) -> Optional[User]:
        if user_id <= 0:
            return None
        return self.user_repo.find_by_id(user_id)

    def query_user_by_phone(self, partial: str) -> List[User]:
        """Substring search over phone numbers."""
        if not partial:
            return []
        return self.user_repo.query_by_phone_partial(partial)

    def set_balance(self, user_id: int, amount: float) -> bool:
        """Overwrite a user's balance; every other field is written back unchanged."""
        if user_id <= 0 or amount < 0:
            logger.debug("Balance update rejected", user_id=user_id, amount=amount)
            return False

        user = self.user_repo.find_by_id(user_id)
        if user is None:
            return False

        user.balance = amount
        if self.user_repo.save(user) is None:
            return False
        logger.info("Balance updated", user_id=user_id, balance=amount)
        return True
