import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import dataclasses  # noqa: E402

import pytest  # noqa: E402
from bson import ObjectId  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from main import app  # noqa: E402
from shared.dependencies import get_user_repository  # noqa: E402
from shared.exceptions import ConflictError, NoUsersError, NotFoundError  # noqa: E402
from users.domain.entities import User, UserUpdate  # noqa: E402


class InMemoryUserRepository:
    """UserRepository backed by a dict, with the same email uniqueness as the store."""

    def __init__(self):
        self.users: dict[str, User] = {}

    async def list_all(self) -> list[User]:
        if not self.users:
            raise NoUsersError()
        return [_public(u) for u in self.users.values()]

    async def get_by_id(self, user_id: str) -> User | None:
        user = self.users.get(user_id)
        return dataclasses.replace(user) if user else None

    async def get_by_email(self, email: str) -> User | None:
        for user in self.users.values():
            if user.email == email:
                return dataclasses.replace(user)
        return None

    async def create(self, user: User) -> User:
        self._check_unique(user.email)
        stored = dataclasses.replace(user, id=str(ObjectId()))
        self.users[stored.id] = stored
        return dataclasses.replace(stored)

    async def update_by_id(self, user_id: str, changes: UserUpdate) -> User:
        if user_id not in self.users:
            raise NotFoundError("User", user_id)
        if changes.email is not None:
            self._check_unique(changes.email, exclude=user_id)
        self.users[user_id] = dataclasses.replace(self.users[user_id], **changes.as_fields())
        return _public(self.users[user_id])

    async def delete_by_id(self, user_id: str) -> None:
        if self.users.pop(user_id, None) is None:
            raise NotFoundError("User", user_id)

    def _check_unique(self, email: str, exclude: str | None = None) -> None:
        for user_id, user in self.users.items():
            if user.email == email and user_id != exclude:
                raise ConflictError("User already exists")


def _public(user: User) -> User:
    return dataclasses.replace(user, password_hash=None)


def user_payload(**overrides) -> dict:
    payload = {
        "firstName": "Alice",
        "lastName": "Smith",
        "email": "alice@example.com",
        "password": "secret123",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture(autouse=True)
def override_repository(repo):
    app.dependency_overrides[get_user_repository] = lambda: repo
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def payload():
    return user_payload
