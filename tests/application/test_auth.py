"""Tests for account use cases: register, login, password and profile."""

import pytest

from homedash.application.change_password import ChangePasswordHandler
from homedash.application.login import LoginHandler
from homedash.application.register_user import RegisterUserHandler
from homedash.application.session import Session
from homedash.application.update_profile import UpdateProfileHandler
from homedash.domain.exceptions import (
    DuplicateKeyError,
    UnauthorizedError,
    ValidationError,
)
from tests.fakes import add_user, build_repos, session_for


def _register(repos):
    return RegisterUserHandler(repos.users, repos.hasher)


class TestRegisterUser:

    async def test_creates_user_without_household(self, tmp_path):
        repos = build_repos(tmp_path)
        user = await _register(repos).handle("alice", "Secret123", "Alice", "alice@example.com")
        assert user.id == 1
        assert not user.has_household
        assert user.password_hash == "hashed:Secret123"

    async def test_persists_immediately(self, tmp_path):
        repos = build_repos(tmp_path)
        await _register(repos).handle("alice", "Secret123", "Alice", "alice@example.com")
        reloaded = build_repos(tmp_path)
        assert await reloaded.users.get_by_username("alice") is not None

    async def test_duplicate_username_ignores_case(self, tmp_path):
        repos = build_repos(tmp_path)
        await _register(repos).handle("Alice", "Secret123", "Alice", "a@example.com")
        with pytest.raises(DuplicateKeyError):
            await _register(repos).handle("alice", "Secret123", "Other", "b@example.com")

    @pytest.mark.parametrize(
        "username, password, email, message",
        [
            ("al", "Secret123", "a@example.com", "Username"),
            ("alice", "secret", "a@example.com", "Password"),
            ("alice", "Secret123", "not-an-email", "valid email"),
        ],
    )
    async def test_rejects_invalid_input(self, tmp_path, username, password, email, message):
        repos = build_repos(tmp_path)
        with pytest.raises(ValidationError, match=message):
            await _register(repos).handle(username, password, "Alice", email)
        assert await repos.users.list_all() == []


class TestLogin:

    async def test_login_fills_session(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice")
        session = Session()
        user = await LoginHandler(repos.users, repos.hasher).handle(session, "ALICE", "Secret123")
        assert session.is_authenticated
        assert session.user == user

    async def test_wrong_password(self, tmp_path):
        repos = build_repos(tmp_path)
        await add_user(repos, "alice")
        session = Session()
        with pytest.raises(UnauthorizedError, match="Invalid username or password"):
            await LoginHandler(repos.users, repos.hasher).handle(session, "alice", "nope")
        assert not session.is_authenticated

    async def test_unknown_user_gets_same_message(self, tmp_path):
        repos = build_repos(tmp_path)
        with pytest.raises(UnauthorizedError, match="Invalid username or password"):
            await LoginHandler(repos.users, repos.hasher).handle(Session(), "ghost", "x")

    async def test_blank_credentials(self, tmp_path):
        repos = build_repos(tmp_path)
        with pytest.raises(ValidationError):
            await LoginHandler(repos.users, repos.hasher).handle(Session(), " ", "")

    async def test_anonymous_session_is_rejected(self):
        with pytest.raises(UnauthorizedError, match="logged in"):
            Session().require_user()


class TestChangePassword:

    async def test_changes_hash(self, tmp_path):
        repos = build_repos(tmp_path)
        session = session_for(await add_user(repos, "alice"))
        await ChangePasswordHandler(repos.users, repos.hasher).handle(
            session, "Secret123", "Better456"
        )
        stored = await repos.users.get_by_id(session.user.id)
        assert stored.password_hash == "hashed:Better456"

    async def test_wrong_current_password(self, tmp_path):
        repos = build_repos(tmp_path)
        session = session_for(await add_user(repos, "alice"))
        with pytest.raises(UnauthorizedError, match="Current password"):
            await ChangePasswordHandler(repos.users, repos.hasher).handle(
                session, "Wrong1234", "Better456"
            )

    async def test_weak_new_password(self, tmp_path):
        repos = build_repos(tmp_path)
        session = session_for(await add_user(repos, "alice"))
        with pytest.raises(ValidationError):
            await ChangePasswordHandler(repos.users, repos.hasher).handle(
                session, "Secret123", "weak"
            )


class TestUpdateProfile:

    async def test_updates_name_and_email(self, tmp_path):
        repos = build_repos(tmp_path)
        session = session_for(await add_user(repos, "alice"))
        updated = await UpdateProfileHandler(repos.users).handle(
            session, name=" Alice Smith ", email="smith@example.com"
        )
        assert updated.name == "Alice Smith"
        assert updated.email == "smith@example.com"
        assert session.user.name == "Alice Smith"

    async def test_invalid_email(self, tmp_path):
        repos = build_repos(tmp_path)
        session = session_for(await add_user(repos, "alice"))
        with pytest.raises(ValidationError, match="valid email"):
            await UpdateProfileHandler(repos.users).handle(session, email="nope")

    async def test_requires_login(self, tmp_path):
        repos = build_repos(tmp_path)
        with pytest.raises(UnauthorizedError):
            await UpdateProfileHandler(repos.users).handle(Session(), name="X")
