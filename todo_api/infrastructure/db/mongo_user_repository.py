# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import EmailAlreadyExistsError, UnexpectedError
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise UnexpectedError(f"Error finding user by email: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to save (id is ignored)

        Returns:
            Saved User domain model with ID set

        Raises:
            EmailAlreadyExistsError: If the unique email index rejects the insert
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise EmailAlreadyExistsError(user.email)
        except PyMongoError as e:
            raise UnexpectedError(f"Error saving user: {str(e)}")

        return User(
            id=str(result.inserted_id),
            email=user.email,
            hashed_password=user.hashed_password,
        )

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to a MongoDB document (without _id)"""
        return {
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
