"""Statistics service: read-only, time-ordered views over bills."""

from collections import defaultdict
from datetime import datetime
from typing import Dict, List

from billtracker.domain.repositories.bill_repository import BillRepository
from billtracker.domain.schemas.bill import Bill


class StatisticsService:
    def __init__(self, bill_repo: BillRepository):
        self.bill_repo = bill_repo

    def query_by_time_in_order(self, start: datetime, end: datetime) -> List[Bill]:
        if start > end:
            return []
        return self.bill_repo.query_by_time_in_order(start, end)

    def query_by_time_and_event_in_order(self, start: datetime, end: datetime) -> List[Bill]:
        if start > end:
            return []
        return self.bill_repo.query_by_time_and_event_in_order(start, end)

    def total_by_event(self, start: datetime, end: datetime) -> Dict[int, float]:
        """Sum of bill amounts per event id (0 = uncategorized)."""
        totals: Dict[int, float] = defaultdict(float)
        for bill in self.query_by_time_and_event_in_order(start, end):
            totals[bill.event_id] += bill.amount
        return dict(totals)

    def total_amount(self, start: datetime, end: datetime) -> float:
        return sum(bill.amount for bill in self.query_by_time_in_order(start, end))
