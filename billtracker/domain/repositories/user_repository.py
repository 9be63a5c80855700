"""
User Repository Interface.
"""

from typing import List, Optional

from billtracker.domain.repositories.base import BaseRepository
from billtracker.domain.schemas.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def query_by_phone(self, phone: str) -> Optional[User]:
        """Get the user registered under an exact phone number."""
        ...

    def query_by_phone_partial(self, partial: str) -> List[User]:
        """Get users whose phone contains ``partial``."""
        ...

    def set_balance_by_phone(self, phone: str, balance: float) -> bool:
        """Overwrite the balance of the user with this phone."""
        ...
