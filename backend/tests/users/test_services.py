import pytest
from bson import ObjectId

from shared.exceptions import ConflictError, NoUsersError, NotFoundError, ValidationError
from users.application.hashing import verify_password
from users.application.services import delete_user, list_users, register_user, update_user


async def register_alice(repo, **overrides):
    fields = {
        "first_name": "Alice",
        "last_name": "Smith",
        "email": "alice@example.com",
        "password": "secret123",
    }
    fields.update(overrides)
    return await register_user(repo, **fields)


async def test_register_user(repo):
    user = await register_alice(repo)
    assert user.id is not None
    assert user.first_name == "Alice"
    assert user.email == "alice@example.com"
    assert user.date is not None
    assert user.password_hash != "secret123"
    assert verify_password("secret123", user.password_hash)


async def test_register_collects_all_errors(repo):
    with pytest.raises(ValidationError) as exc_info:
        await register_alice(repo, first_name="", email="nope", password="short")
    assert [e.param for e in exc_info.value.errors] == ["firstName", "email", "password"]
    assert repo.users == {}


async def test_register_duplicate_email(repo):
    await register_alice(repo)
    with pytest.raises(ConflictError, match="User already exists"):
        await register_alice(repo, first_name="Bob")


async def test_list_users_empty(repo):
    with pytest.raises(NoUsersError):
        await list_users(repo)
    assert await list_users(repo, empty_is_error=False) == []


async def test_list_users_hides_password(repo):
    await register_alice(repo)
    users = await list_users(repo)
    assert len(users) == 1
    assert users[0].password_hash is None


async def test_update_user_partial(repo):
    user = await register_alice(repo)
    updated = await update_user(repo, user.id, last_name="Jones")
    assert updated.last_name == "Jones"
    assert updated.first_name == "Alice"
    assert updated.email == "alice@example.com"


async def test_update_user_ignores_empty_strings(repo):
    user = await register_alice(repo)
    updated = await update_user(repo, user.id, first_name="", email="")
    assert updated.first_name == "Alice"
    assert updated.email == "alice@example.com"


async def test_update_user_reports_email_before_password(repo):
    user = await register_alice(repo)
    with pytest.raises(ValidationError) as exc_info:
        await update_user(repo, user.id, email="bad", password="1")
    assert [e.param for e in exc_info.value.errors] == ["email"]


async def test_update_user_not_found(repo):
    with pytest.raises(NotFoundError):
        await update_user(repo, str(ObjectId()), first_name="Bob")


async def test_delete_user(repo):
    user = await register_alice(repo)
    await delete_user(repo, user.id)
    assert await repo.get_by_id(user.id) is None


async def test_delete_user_not_found(repo):
    with pytest.raises(NotFoundError, match="User not found"):
        await delete_user(repo, str(ObjectId()))
