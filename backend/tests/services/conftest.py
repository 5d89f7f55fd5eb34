"""Service test fixtures — in-memory record store standing in for SQL.

Invariants:
    - InMemoryUserRepository satisfies the UserRepository protocol structurally
    - Ids assigned sequentially from 1 to every insert, including saves that
      carry an unknown id; insertion order preserved by find_all
    - Every delete_by_id call is recorded for call-count assertions
"""

import pytest

from user_api.models.user import User
from user_api.services.user_service import UserService


class InMemoryUserRepository:
    """Dict-backed record store keyed by id."""

    def __init__(self):
        self.rows: dict[int, User] = {}
        self.delete_calls: list[int] = []
        self._next_id = 1

    async def find_by_id(self, user_id):
        return self.rows.get(user_id)

    async def find_all(self):
        return list(self.rows.values())

    async def find_by_email(self, email):
        return next(
            (u for u in self.rows.values() if u.email == email), None,
        )

    async def save(self, user):
        if user.id not in self.rows:
            user.id = self._next_id
            self._next_id += 1
        self.rows[user.id] = user
        return user

    async def delete_by_id(self, user_id):
        self.delete_calls.append(user_id)
        self.rows.pop(user_id, None)


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
async def existing_user(repository):
    """One stored user: id=1, User, user@gmail.com."""
    return await repository.save(
        User(name="User", email="user@gmail.com", password="password"),
    )
