"""Tests for the JSON user repository."""

import json

import pytest

from homedash.domain.exceptions import (
    BusinessRuleViolation,
    DuplicateKeyError,
    InvalidArgumentError,
    RecordNotFoundError,
    ValidationError,
)
from homedash.domain.model.user import User
from tests.fakes import add_user, build_repos


class TestUniqueness:

    async def test_username_is_case_insensitively_unique(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "Alice")
        with pytest.raises(DuplicateKeyError, match="Username 'alice' already exists"):
            await add_user(repos, "alice")
        assert len(await repos.users.list_all()) == 1

    async def test_rename_onto_existing_username_is_rejected(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice")
        bob = await add_user(repos, "bob")
        bob.username = "ALICE"
        with pytest.raises(DuplicateKeyError):
            await repos.users.update(bob)
        assert (await repos.users.get_by_id(bob.id)).username == "bob"

    async def test_updating_a_user_keeps_its_own_name(self, tmp_path):
        repos = build_repos(tmp_path)
        alice = await add_user(repos, "alice")
        alice.points = 5
        assert (await repos.users.update(alice)).points == 5

    async def test_is_username_unique(self, tmp_path):
        repos = build_repos(tmp_path)
        alice = await add_user(repos, "alice")
        assert not await repos.users.is_username_unique("ALICE")
        assert await repos.users.is_username_unique("ALICE", exclude_id=alice.id)
        assert await repos.users.is_username_unique("carol")
        assert not await repos.users.is_username_unique("  ")


class TestQueries:

    async def test_get_by_username_ignores_case(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice")
        found = await repos.users.get_by_username("ALICE")
        assert found is not None and found.username == "alice"

    async def test_get_by_username_missing(self, tmp_path):
        repos = build_repos(tmp_path)
        assert await repos.users.get_by_username("nobody") is None

    async def test_get_by_username_rejects_blank(self, tmp_path):
        repos = build_repos(tmp_path)
        with pytest.raises(InvalidArgumentError):
            await repos.users.get_by_username(" ")

    async def test_list_by_household(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice", household_id=1)
        await add_user(repos, "bob", household_id=2)
        await add_user(repos, "carol", household_id=1)
        members = await repos.users.list_by_household(1)
        assert [u.username for u in members] == ["alice", "carol"]


class TestInvariants:

    async def test_negative_points_are_rejected(self, tmp_path):
        repos = build_repos(tmp_path)
        alice = await add_user(repos, "alice")
        alice.points = -1
        with pytest.raises(ValidationError, match="negative"):
            await repos.users.update(alice)

    async def test_insert_stamps_joined_date(self, tmp_path):
        repos = build_repos(tmp_path)
        alice = await add_user(repos, "alice")
        assert alice.joined_date == repos.clock.current

    async def test_update_of_unknown_user_names_the_entity(self, tmp_path):
        repos = build_repos(tmp_path)
        with pytest.raises(RecordNotFoundError, match="User with ID 7") as exc_info:
            await repos.users.update(User(id=7, username="ghost"))
        assert exc_info.value.entity == "User"


class TestMoveToHousehold:

    async def test_moves_user_with_room_left(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice", household_id=1, is_admin=True)
        bob = await add_user(repos, "bob")
        bob.household_id = 1
        moved = await repos.users.move_to_household(bob, max_members=2)
        assert moved.household_id == 1

    async def test_full_household_is_rejected(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice", household_id=1, is_admin=True)
        await add_user(repos, "bob", household_id=1)
        carol = await add_user(repos, "carol")
        carol.household_id = 1
        with pytest.raises(BusinessRuleViolation, match="maximum of 2 members"):
            await repos.users.move_to_household(carol, max_members=2)
        assert not (await repos.users.get_by_id(carol.id)).has_household

    async def test_unknown_user_names_the_entity(self, tmp_path):
        repos = build_repos(tmp_path)
        with pytest.raises(RecordNotFoundError, match="User with ID 7"):
            await repos.users.move_to_household(
                User(id=7, username="ghost", household_id=1), max_members=2
            )


class TestSerialization:

    async def test_round_trip_through_file(self, tmp_path):
        repos = build_repos(tmp_path)
        alice = await add_user(repos, "alice", household_id=2, is_admin=True)
        await repos.users.persist()

        reloaded = await build_repos(tmp_path).users.get_by_id(alice.id)
        assert reloaded == alice

    async def test_file_uses_snake_case_keys(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice")
        await repos.users.persist()

        raw = json.loads((tmp_path / "users.json").read_text(encoding="utf-8"))
        assert set(raw[0]) >= {"id", "username", "password_hash", "household_id", "is_admin"}
