"""
Annotation Repository Interface.
"""

from typing import List

from billtracker.domain.repositories.base import BaseRepository
from billtracker.domain.schemas.annotation import Annotation


class AnnotationRepository(BaseRepository[Annotation]):
    """Interface for Annotation-specific operations."""

    def find_by_bill_id(self, bill_id: int) -> List[Annotation]:
        """Get the annotation history of a bill, newest first."""
        ...

    def find_by_author_id(self, author_id: int) -> List[Annotation]:
        """Get annotations written by a user, newest first."""
        ...
