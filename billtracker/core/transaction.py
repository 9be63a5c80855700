"""Outcome of a grouped repository write."""

from dataclasses import dataclass


@dataclass
class TransactionScope:
    """Outcome of an atomic() block; failed is set by any guarded repository error."""
    failed: bool = False
