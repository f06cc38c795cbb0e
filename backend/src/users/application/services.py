from datetime import datetime, timezone

import structlog

from shared.exceptions import ConflictError, NoUsersError, NotFoundError, ValidationError
from users.application.hashing import hash_password
from users.domain.entities import User, UserUpdate
from users.domain.repository import UserRepository
from users.domain.validation import (
    REGISTRATION_RULES,
    UPDATE_RULES,
    errors_for,
    is_present,
    validate,
)

logger = structlog.get_logger(__name__)

# Update failures are reported one field at a time, in this order.
UPDATE_REPORT_ORDER = ("email", "password")


async def list_users(repo: UserRepository, empty_is_error: bool = True) -> list[User]:
    try:
        return await repo.list_all()
    except NoUsersError:
        if empty_is_error:
            raise
        return []


async def register_user(
    repo: UserRepository,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    password: str | None,
) -> User:
    errors = validate(
        {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "password": password,
        },
        REGISTRATION_RULES,
    )
    if errors:
        raise ValidationError(errors)

    if await repo.get_by_email(email):
        raise ConflictError("User already exists")

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=await hash_password(password),
        date=datetime.now(timezone.utc),
    )
    created = await repo.create(user)
    logger.info("user_created", user_id=created.id)
    return created


async def update_user(
    repo: UserRepository,
    user_id: str,
    first_name: str | None = None,
    last_name: str | None = None,
    email: str | None = None,
    password: str | None = None,
) -> User:
    errors = validate({"email": email, "password": password}, UPDATE_RULES)
    for field in UPDATE_REPORT_ORDER:
        failures = errors_for(errors, field)
        if failures:
            raise ValidationError(failures)

    changes = UserUpdate(
        first_name=first_name if is_present(first_name) else None,
        last_name=last_name if is_present(last_name) else None,
        email=email if is_present(email) else None,
        password_hash=await hash_password(password) if is_present(password) else None,
    )

    if not await repo.get_by_id(user_id):
        raise NotFoundError("User", user_id)

    user = await repo.update_by_id(user_id, changes)
    logger.info("user_updated", user_id=user_id, fields=sorted(changes.as_fields()))
    return user


async def delete_user(repo: UserRepository, user_id: str) -> None:
    if not await repo.get_by_id(user_id):
        raise NotFoundError("User", user_id)
    await repo.delete_by_id(user_id)
    logger.info("user_deleted", user_id=user_id)
