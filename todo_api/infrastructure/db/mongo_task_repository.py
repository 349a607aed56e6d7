# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.task_repository import TaskRepository
from ...domain.models.task import Task, TaskStatus
from ...domain.constants import TaskFields
from ...domain.exceptions import UnexpectedError
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_task_collection


class MongoTaskRepository(TaskRepository):
    """MongoDB implementation of TaskRepository"""

    def __init__(self, task_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.task_collection = task_collection if task_collection is not None else get_task_collection()

    async def find_by_owner(self, user_id: str) -> List[Task]:
        """Find all tasks owned by a user"""
        if not user_id:
            return []

        try:
            cursor = self.task_collection.find({TaskFields.USER_ID: user_id})
            tasks = []
            async for document in cursor:
                tasks.append(self._document_to_task(document))
            return tasks
        except PyMongoError as e:
            raise UnexpectedError(f"Error listing tasks for owner: {str(e)}")

    async def find_by_id(self, task_id: str, user_id: str) -> Optional[Task]:
        """Find a task by ID among the caller's tasks"""
        query = self._owned_task_query(task_id, user_id)
        if query is None:
            return None

        try:
            document = await self.task_collection.find_one(query)
        except PyMongoError as e:
            raise UnexpectedError(f"Error finding task by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_task(document)

    async def create(self, task: Task) -> Task:
        """Insert a new task; id and created_at are assigned here"""
        if not task:
            raise ValueError("Task cannot be None")

        task_dict = self._task_to_dict(task)
        task_dict[TaskFields.CREATED_AT] = utc_now()

        try:
            result = await self.task_collection.insert_one(task_dict)
        except PyMongoError as e:
            raise UnexpectedError(f"Error saving task: {str(e)}")

        task_dict[TaskFields.MONGO_ID] = result.inserted_id
        return self._document_to_task(task_dict)

    async def update(self, task_id: str, user_id: str, changes: Dict[str, Any]) -> Optional[Task]:
        """Apply changes to an owned task and return the updated task"""
        query = self._owned_task_query(task_id, user_id)
        if query is None:
            return None

        # Identity, ownership and creation time are never rewritten
        allowed = {TaskFields.NAME, TaskFields.STATUS}
        update_fields = {key: value for key, value in changes.items() if key in allowed}
        if not update_fields:
            return await self.find_by_id(task_id, user_id)

        try:
            document = await self.task_collection.find_one_and_update(
                query,
                {"$set": update_fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise UnexpectedError(f"Error updating task: {str(e)}")

        if document is None:
            return None
        return self._document_to_task(document)

    async def delete(self, task_id: str, user_id: str) -> Optional[Task]:
        """Remove an owned task and return the removed task"""
        query = self._owned_task_query(task_id, user_id)
        if query is None:
            return None

        try:
            document = await self.task_collection.find_one_and_delete(query)
        except PyMongoError as e:
            raise UnexpectedError(f"Error deleting task: {str(e)}")

        if document is None:
            return None
        return self._document_to_task(document)

    def _owned_task_query(self, task_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """Build the {_id, user_id} filter; None when the id is not a valid ObjectId"""
        if not task_id or not user_id:
            return None

        try:
            object_id = ObjectId(task_id)
        except (InvalidId, TypeError):
            return None

        return {TaskFields.MONGO_ID: object_id, TaskFields.USER_ID: user_id}

    def _document_to_task(self, document: Dict[str, Any]) -> Task:
        """Convert MongoDB document to Task domain model"""
        if not document or TaskFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Task(
            id=str(document[TaskFields.MONGO_ID]),
            user_id=document.get(TaskFields.USER_ID, ""),
            name=document.get(TaskFields.NAME, ""),
            status=TaskStatus(document.get(TaskFields.STATUS, TaskStatus.TO_DO.value)),
            created_at=document.get(TaskFields.CREATED_AT),
        )

    def _task_to_dict(self, task: Task) -> Dict[str, Any]:
        """Convert Task domain model to a MongoDB document (without _id)"""
        return {
            TaskFields.NAME: task.name,
            TaskFields.STATUS: TaskStatus(task.status).value,
            TaskFields.USER_ID: task.user_id,
        }
