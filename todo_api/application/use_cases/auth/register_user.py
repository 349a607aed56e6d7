# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import EmailAlreadyExistsError
from ....core.security import hash_password
from ...dto.auth_dto import UserCredentials
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserCredentials) -> UserResponse:
        """
        Register a new user

        Args:
            request: Validated registration credentials

        Returns:
            UserResponse with created user information

        Raises:
            EmailAlreadyExistsError: If user with email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(request.email)

        # Hash password off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password)

        # Create domain user entity
        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            hashed_password=hashed_password,
        )

        # Save user (the unique index on email still catches concurrent duplicates)
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return UserResponse(
            id=saved_user.id or "",
            email=saved_user.email,
        )
