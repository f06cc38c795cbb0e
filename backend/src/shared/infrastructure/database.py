import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from shared.config import Settings
from shared.exceptions import StartupError

logger = structlog.get_logger(__name__)

USERS_COLLECTION = "users"


def create_client(settings: Settings) -> AsyncMongoClient:
    return AsyncMongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
        tz_aware=True,
    )


async def ensure_indexes(db: AsyncDatabase) -> None:
    await db[USERS_COLLECTION].create_index("email", unique=True)


async def connect(settings: Settings) -> AsyncMongoClient:
    """Open a client, verify the server answers, and prepare the users collection."""
    client = create_client(settings)
    try:
        await client.admin.command("ping")
        await ensure_indexes(client[settings.MONGO_DB_NAME])
    except PyMongoError as exc:
        logger.error("database_connection_failed", error=str(exc))
        await client.close()
        raise StartupError() from exc

    logger.info("database_connected", database=settings.MONGO_DB_NAME)
    return client
