# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, TaskFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
TASKS_COLLECTION = "tasks"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client is created lazily; Motor only connects on the first operation.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_task_collection() -> AsyncIOMotorCollection:
    """
    Get tasks collection from MongoDB

    Returns:
        MongoDB collection for tasks
    """
    return get_database()[TASKS_COLLECTION]


async def initialize_database() -> None:
    """
    Check connectivity and create the indexes the application relies on.

    Email uniqueness is enforced by a unique index so that two concurrent
    registrations with the same email cannot both succeed.
    """
    database = get_database()
    await database.command("ping")
    logger.info(f"Connected to MongoDB database '{database.name}'")

    await get_user_collection().create_index(
        [(UserFields.EMAIL, ASCENDING)], unique=True, name="email_unique"
    )
    await get_task_collection().create_index(
        [(TaskFields.USER_ID, ASCENDING)], name="user_id"
    )
    logger.info("MongoDB indexes ensured")


def close_database() -> None:
    """Close the MongoDB client and reset the singletons."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")

    _mongo_client = None
    _mongo_database = None
