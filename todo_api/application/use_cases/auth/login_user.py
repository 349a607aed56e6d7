# Standard library imports
import asyncio
from functools import lru_cache
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthError
from ....core.security import hash_password, verify_password, issue_token
from ...dto.auth_dto import LoginRequest, LoginResponse


INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    # Checked against when the email is unknown so both failure paths cost one bcrypt round
    return hash_password("dummy-password-for-timing")


def _check_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    return verify_password(plain_password, hashed_password or _dummy_password_hash())


class LoginUserUseCase:
    """Use case for authenticating a user and issuing an access token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            LoginResponse carrying the token

        Raises:
            AuthError: If the email is unknown or the password does not match.
                The message is identical in both cases.
        """
        user = await self.user_repository.find_by_email(request.email)

        hashed_password: Optional[str] = user.hashed_password if user else None
        # bcrypt runs in a worker thread, including the first dummy hash
        password_ok = await asyncio.to_thread(_check_password, request.password, hashed_password)

        if user is None or not password_ok:
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        token = issue_token(user.id or "", user.email)
        return LoginResponse(token=token)
