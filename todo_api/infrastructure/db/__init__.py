from .mongo_connection import (
    get_database,
    get_user_collection,
    get_task_collection,
    initialize_database,
    close_database,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_task_repository import MongoTaskRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_task_collection",
    "initialize_database",
    "close_database",
    "MongoUserRepository",
    "MongoTaskRepository",
]
