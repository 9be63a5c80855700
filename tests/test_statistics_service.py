"""Tests for StatisticsService."""

from datetime import timedelta

import pytest

from billtracker.application.services.statistics_service import StatisticsService
from billtracker.domain.schemas.bill import Bill

from conftest import BASE_TIME

START = BASE_TIME - timedelta(days=7)
END = BASE_TIME


@pytest.fixture
def statistics_service(mock_bill_repo):
    return StatisticsService(mock_bill_repo)


class TestOrderedQueries:
    def test_time_in_order_delegates(self, statistics_service, mock_bill_repo):
        expected = [Bill(id=1), Bill(id=2)]
        mock_bill_repo.query_by_time_in_order.return_value = expected

        assert statistics_service.query_by_time_in_order(START, END) == expected
        mock_bill_repo.query_by_time_in_order.assert_called_once_with(START, END)

    def test_time_and_event_in_order_delegates(self, statistics_service, mock_bill_repo):
        mock_bill_repo.query_by_time_and_event_in_order.return_value = [Bill(id=3)]

        assert len(statistics_service.query_by_time_and_event_in_order(START, END)) == 1
        mock_bill_repo.query_by_time_and_event_in_order.assert_called_once_with(START, END)

    def test_inverted_range(self, statistics_service, mock_bill_repo):
        assert statistics_service.query_by_time_in_order(END, START) == []
        assert statistics_service.query_by_time_and_event_in_order(END, START) == []
        mock_bill_repo.query_by_time_in_order.assert_not_called()
        mock_bill_repo.query_by_time_and_event_in_order.assert_not_called()

    def test_single_instant_range(self, statistics_service, mock_bill_repo):
        mock_bill_repo.query_by_time_in_order.return_value = []

        statistics_service.query_by_time_in_order(END, END)

        mock_bill_repo.query_by_time_in_order.assert_called_once_with(END, END)


class TestTotals:
    def test_total_by_event(self, statistics_service, mock_bill_repo):
        mock_bill_repo.query_by_time_and_event_in_order.return_value = [
            Bill(id=1, event_id=0, amount=5.0),
            Bill(id=2, event_id=1, amount=10.0),
            Bill(id=3, event_id=1, amount=20.5),
            Bill(id=4, event_id=2, amount=7.0),
        ]

        assert statistics_service.total_by_event(START, END) == {0: 5.0, 1: 30.5, 2: 7.0}

    def test_total_by_event_empty(self, statistics_service, mock_bill_repo):
        mock_bill_repo.query_by_time_and_event_in_order.return_value = []

        assert statistics_service.total_by_event(START, END) == {}

    def test_total_amount(self, statistics_service, mock_bill_repo):
        mock_bill_repo.query_by_time_in_order.return_value = [Bill(amount=1.5), Bill(amount=2.5)]

        assert statistics_service.total_amount(START, END) == pytest.approx(4.0)

    def test_total_amount_inverted_range(self, statistics_service, mock_bill_repo):
        assert statistics_service.total_amount(END, START) == 0
