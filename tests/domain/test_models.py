"""Tests for the domain records and their small behaviours."""

from datetime import datetime, timedelta, timezone

import pytest

from homedash.domain.exceptions import DuplicateKeyError, StoreError
from homedash.domain.model.chore import Chore
from homedash.domain.model.shopping_item import normalize_category
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.model.user import NO_HOUSEHOLD, User

NOW = datetime(2025, 3, 3, 12, 0, tzinfo=timezone.utc)


class TestUrgencyLevel:

    def test_ranks_most_urgent_first(self):
        ordered = sorted(UrgencyLevel, key=lambda u: u.rank)
        assert ordered == [
            UrgencyLevel.CRITICAL,
            UrgencyLevel.HIGH,
            UrgencyLevel.MEDIUM,
            UrgencyLevel.LOW,
            UrgencyLevel.WISH,
        ]

    def test_parse_is_case_insensitive(self):
        assert UrgencyLevel.parse(" critical ") is UrgencyLevel.CRITICAL

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown urgency level"):
            UrgencyLevel.parse("Someday")


class TestUser:

    def test_new_user_has_no_household(self):
        user = User(username="alice")
        assert user.household_id == NO_HOUSEHOLD
        assert not user.has_household

    def test_is_admin_of_checks_household(self):
        user = User(username="alice", household_id=3, is_admin=True)
        assert user.is_admin_of(3)
        assert not user.is_admin_of(4)

    def test_member_is_not_admin(self):
        assert not User(username="bob", household_id=3).is_admin_of(3)


class TestChore:

    def test_past_due_incomplete_chore_is_overdue(self):
        chore = Chore(title="Bins", due_date=NOW - timedelta(hours=1))
        assert chore.is_overdue(NOW)

    def test_completed_chore_is_never_overdue(self):
        chore = Chore(title="Bins", due_date=NOW - timedelta(days=1), is_completed=True)
        assert not chore.is_overdue(NOW)

    def test_future_chore_is_not_overdue(self):
        assert not Chore(title="Bins", due_date=NOW + timedelta(days=1)).is_overdue(NOW)


class TestNormalizeCategory:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  groCERIES ", "Groceries"),
            ("cleaning", "Cleaning"),
            ("PET FOOD", "Pet food"),
            ("x", "X"),
        ],
    )
    def test_first_letter_upper_rest_lower(self, raw, expected):
        assert normalize_category(raw) == expected


class TestErrors:

    def test_duplicate_key_message(self):
        assert str(DuplicateKeyError("username", "alice")) == "Username 'alice' already exists"

    def test_store_error_mentions_collection_and_id(self):
        exc = StoreError("Record not found", collection="users.json", record_id=7)
        assert str(exc) == "Record not found [users.json] (id=7)"
