from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from shared.config import settings
from shared.infrastructure.database import USERS_COLLECTION
from users.domain.repository import UserRepository
from users.infrastructure.user_repository import MongoUserRepository


def get_db(request: Request) -> AsyncDatabase:
    return request.app.state.mongo_client[settings.MONGO_DB_NAME]


def get_user_repository(db: AsyncDatabase = Depends(get_db)) -> UserRepository:
    return MongoUserRepository(db[USERS_COLLECTION])
