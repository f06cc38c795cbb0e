from typing import Protocol

from users.domain.entities import User, UserUpdate


class UserRepository(Protocol):
    async def list_all(self) -> list[User]: ...

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def create(self, user: User) -> User: ...

    async def update_by_id(self, user_id: str, changes: UserUpdate) -> User: ...

    async def delete_by_id(self, user_id: str) -> None: ...
