from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from shared.exceptions import ConflictError, NoUsersError, NotFoundError, StoreError
from users.domain.entities import User, UserUpdate

# Document field names, as stored.
FIELD_NAMES = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "password_hash": "password",
}
WITHOUT_PASSWORD = {"password": 0}


class MongoUserRepository:
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def list_all(self) -> list[User]:
        try:
            documents = await self.collection.find({}, WITHOUT_PASSWORD).to_list()
        except PyMongoError as exc:
            raise StoreError() from exc
        if not documents:
            raise NoUsersError()
        return [_to_entity(d) for d in documents]

    async def get_by_id(self, user_id: str) -> User | None:
        object_id = _object_id(user_id)
        if object_id is None:
            return None
        return await self._find_one({"_id": object_id})

    async def get_by_email(self, email: str) -> User | None:
        return await self._find_one({"email": email})

    async def create(self, user: User) -> User:
        document = {
            "firstName": user.first_name,
            "lastName": user.last_name,
            "email": user.email,
            "password": user.password_hash,
            "date": user.date,
        }
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as exc:
            raise ConflictError("User already exists") from exc
        except PyMongoError as exc:
            raise StoreError() from exc
        document["_id"] = result.inserted_id
        return _to_entity(document)

    async def update_by_id(self, user_id: str, changes: UserUpdate) -> User:
        object_id = _object_id(user_id)
        if object_id is None:
            raise NotFoundError("User", user_id)

        values = {FIELD_NAMES[name]: value for name, value in changes.as_fields().items()}
        try:
            if changes.is_empty():
                document = await self.collection.find_one({"_id": object_id}, WITHOUT_PASSWORD)
            else:
                document = await self.collection.find_one_and_update(
                    {"_id": object_id},
                    {"$set": values},
                    projection=WITHOUT_PASSWORD,
                    return_document=ReturnDocument.AFTER,
                )
        except DuplicateKeyError as exc:
            raise ConflictError("User already exists") from exc
        except PyMongoError as exc:
            raise StoreError() from exc

        if document is None:
            raise NotFoundError("User", user_id)
        return _to_entity(document)

    async def delete_by_id(self, user_id: str) -> None:
        object_id = _object_id(user_id)
        if object_id is None:
            raise NotFoundError("User", user_id)
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            raise StoreError() from exc
        if result.deleted_count == 0:
            raise NotFoundError("User", user_id)

    async def _find_one(self, query: dict[str, Any]) -> User | None:
        try:
            document = await self.collection.find_one(query)
        except PyMongoError as exc:
            raise StoreError() from exc
        return _to_entity(document) if document else None


def _object_id(user_id: str) -> ObjectId | None:
    # Ids that are not ObjectIds cannot match any stored user.
    return ObjectId(user_id) if ObjectId.is_valid(user_id) else None


def _to_entity(document: dict[str, Any]) -> User:
    return User(
        id=str(document["_id"]),
        first_name=document.get("firstName"),
        last_name=document.get("lastName"),
        email=document.get("email"),
        password_hash=document.get("password"),
        date=document.get("date"),
    )
