"""Tests for UserService and EventService."""

import pytest

from billtracker.application.services.event_service import EventService
from billtracker.application.services.user_service import UserService
from billtracker.domain.schemas.event import Event, EventStatus
from billtracker.domain.schemas.user import User

from conftest import BASE_TIME, USER_PASSWORD_HASH, assign_id


@pytest.fixture
def user_service(mock_user_repo):
    return UserService(mock_user_repo)


@pytest.fixture
def event_service(mock_event_repo):
    return EventService(mock_event_repo)


class TestUserService:
    def test_get_user(self, user_service, mock_user_repo):
        user = User(id=5, phone="13800000005")
        mock_user_repo.find_by_id.return_value = user

        assert user_service.get_user(5) is user

    @pytest.mark.parametrize("user_id", [0, -1])
    def test_get_user_invalid_id(self, user_service, mock_user_repo, user_id):
        assert user_service.get_user(user_id) is None
        mock_user_repo.find_by_id.assert_not_called()

    def test_query_by_phone_partial(self, user_service, mock_user_repo):
        mock_user_repo.query_by_phone_partial.return_value = [User(id=1), User(id=2)]

        assert len(user_service.query_user_by_phone("1380")) == 2
        mock_user_repo.query_by_phone_partial.assert_called_once_with("1380")

    def test_query_by_empty_phone(self, user_service, mock_user_repo):
        assert user_service.query_user_by_phone("") == []
        mock_user_repo.query_by_phone_partial.assert_not_called()

    def test_set_balance_rewrites_whole_record(self, user_service, mock_user_repo):
        user = User(id=3, phone="13800000003", username="carol", password=USER_PASSWORD_HASH,
                    role="admin", balance=10.0, created_at=BASE_TIME)
        mock_user_repo.find_by_id.return_value = user
        mock_user_repo.save.side_effect = lambda u: u

        assert user_service.set_balance(3, 250.0) is True

        saved = mock_user_repo.save.call_args.args[0]
        assert saved.balance == 250.0
        assert saved.model_dump(exclude={"balance"}) == User(
            id=3, phone="13800000003", username="carol", password=USER_PASSWORD_HASH,
            role="admin", created_at=BASE_TIME,
        ).model_dump(exclude={"balance"})

    @pytest.mark.parametrize("user_id, amount", [(0, 10.0), (-2, 10.0), (3, -0.01)])
    def test_set_balance_rejected_before_storage(self, user_service, mock_user_repo, user_id, amount):
        assert user_service.set_balance(user_id, amount) is False
        mock_user_repo.find_by_id.assert_not_called()
        mock_user_repo.save.assert_not_called()

    def test_set_balance_zero_is_allowed(self, user_service, mock_user_repo):
        mock_user_repo.find_by_id.return_value = User(id=3, balance=9.0)
        mock_user_repo.save.side_effect = lambda u: u

        assert user_service.set_balance(3, 0.0) is True

    def test_set_balance_unknown_user(self, user_service, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None

        assert user_service.set_balance(3, 1.0) is False
        mock_user_repo.save.assert_not_called()


class TestEventQueries:
    def test_query_by_name(self, event_service, mock_event_repo):
        mock_event_repo.find_by_name.return_value = Event(id=1, name="餐饮")

        assert event_service.query_by_name("餐饮").id == 1

    def test_query_by_empty_name(self, event_service, mock_event_repo):
        assert event_service.query_by_name("") is None
        mock_event_repo.find_by_name.assert_not_called()

    def test_query_by_invalid_id(self, event_service, mock_event_repo):
        assert event_service.query_by_id(0) is None
        mock_event_repo.find_by_id.assert_not_called()

    def test_is_available(self, event_service, mock_event_repo):
        mock_event_repo.find_by_id.return_value = Event(id=1, status=EventStatus.FROZEN)
        assert event_service.is_available(1) is False

        mock_event_repo.find_by_id.return_value = Event(id=1, status=EventStatus.AVAILABLE)
        assert event_service.is_available(1) is True

    def test_list_events(self, event_service, mock_event_repo):
        mock_event_repo.list_all.return_value = [Event(id=1, name="餐饮")]

        assert [e.name for e in event_service.list_events()] == ["餐饮"]


class TestCreateEvent:
    def test_success_defaults_to_available(self, event_service, mock_event_repo):
        mock_event_repo.find_by_name.return_value = None
        mock_event_repo.save.side_effect = assign_id(4)
        event = Event(name="医疗")

        result = event_service.create_event(event)

        assert result.id == 4
        assert event.id == 4
        assert result.status == EventStatus.AVAILABLE

    def test_explicit_frozen_is_kept(self, event_service, mock_event_repo):
        mock_event_repo.find_by_name.return_value = None
        mock_event_repo.save.side_effect = assign_id(5)

        result = event_service.create_event(Event(name="医疗", status=EventStatus.FROZEN))

        assert result.status == EventStatus.FROZEN

    def test_empty_name(self, event_service, mock_event_repo):
        assert event_service.create_event(Event(name="")) is None
        mock_event_repo.save.assert_not_called()

    def test_duplicate_name_is_conflict(self, event_service, mock_event_repo):
        mock_event_repo.find_by_name.return_value = Event(id=1, name="餐饮")

        assert event_service.create_event(Event(name="餐饮")) is None
        mock_event_repo.save.assert_not_called()


class TestSetStatus:
    def test_success(self, event_service, mock_event_repo):
        mock_event_repo.find_by_id.return_value = Event(id=1, name="餐饮")
        mock_event_repo.set_status_by_id.return_value = True

        assert event_service.set_status(1, EventStatus.FROZEN) is True
        mock_event_repo.set_status_by_id.assert_called_once_with(1, EventStatus.FROZEN)

    def test_invalid_id(self, event_service, mock_event_repo):
        assert event_service.set_status(0, EventStatus.FROZEN) is False
        mock_event_repo.find_by_id.assert_not_called()

    def test_missing_event_makes_no_mutation(self, event_service, mock_event_repo):
        mock_event_repo.find_by_id.return_value = None

        assert event_service.set_status(9, EventStatus.FROZEN) is False
        mock_event_repo.set_status_by_id.assert_not_called()
        mock_event_repo.save.assert_not_called()

    def test_row_vanishing_before_update(self, event_service, mock_event_repo):
        mock_event_repo.find_by_id.return_value = Event(id=1, name="餐饮")
        mock_event_repo.set_status_by_id.return_value = False

        assert event_service.set_status(1, EventStatus.FROZEN) is False
