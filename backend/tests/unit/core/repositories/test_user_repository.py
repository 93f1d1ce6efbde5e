"""Unit tests for UserRepository without DB."""

import uuid

import pytest

from notekeeper.core.models.user import User
from notekeeper.core.repositories.user_repository import UserRepository


class FakeResult:
    def __init__(self, scalar=None):
        self._scalar = scalar

    def scalar_one_or_none(self):
        return self._scalar


class FakeSession:
    def __init__(self, result=None):
        self._result = result
        self.added = []
        self.commits = 0
        self.refreshed = []
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        return self._result

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        self.commits += 1

    async def refresh(self, obj, attrs=None):
        self.refreshed.append((obj, attrs))


def _user(**overrides):
    data = {"id": uuid.uuid4(), "full_name": "Bob", "email": "bob@example.com", "password_hash": "x"}
    data.update(overrides)
    return User(**data)


@pytest.mark.asyncio
async def test_create_user():
    session = FakeSession()
    repo = UserRepository(session)
    data = {"full_name": "Alice", "email": "alice@example.com", "password_hash": "h"}
    user = await repo.create_user(data)
    assert isinstance(user, User)
    assert session.added == [user]
    assert session.commits == 1
    assert session.refreshed and session.refreshed[0][0] is user


@pytest.mark.asyncio
async def test_get_by_id_found_and_not_found():
    uid = uuid.uuid4()
    repo = UserRepository(FakeSession(FakeResult(_user(id=uid))))
    u = await repo.get_by_id(uid)
    assert isinstance(u, User)
    assert u.id == uid

    repo_none = UserRepository(FakeSession(FakeResult(None)))
    assert await repo_none.get_by_id(uid) is None


@pytest.mark.asyncio
async def test_get_by_email_found_and_not_found():
    repo = UserRepository(FakeSession(FakeResult(_user(email="charlie@example.com"))))
    u = await repo.get_by_email("charlie@example.com")
    assert u.email == "charlie@example.com"

    repo_none = UserRepository(FakeSession(FakeResult(None)))
    assert await repo_none.get_by_email("nobody@example.com") is None


@pytest.mark.asyncio
async def test_is_email_taken():
    repo_taken = UserRepository(FakeSession(FakeResult(_user())))
    assert await repo_taken.is_email_taken("bob@example.com") is True

    repo_free = UserRepository(FakeSession(FakeResult(None)))
    assert await repo_free.is_email_taken("bob@example.com") is False


@pytest.mark.asyncio
async def test_email_lookup_is_case_sensitive(test_session):
    repo = UserRepository(test_session)
    await repo.create_user({"full_name": "A", "email": "Case@Example.com", "password_hash": "h"})

    assert await repo.get_by_email("Case@Example.com") is not None
    assert await repo.get_by_email("case@example.com") is None
