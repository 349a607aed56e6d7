# Local application imports
from ....core.security import verify_token
from ....domain.constants import UserFields
from ...dto.auth_dto import CurrentUser


class GetCurrentUserUseCase:
    """
    Use case for resolving the caller identity from an access token.

    Authentication is stateless: the identity comes from the verified token
    claims and the user collection is not consulted.
    """

    async def execute(self, token: str) -> CurrentUser:
        """
        Get current user from access token

        Raises:
            AuthError: If token is missing, malformed or has an invalid signature
        """
        identity = verify_token(token)
        return CurrentUser(
            id=identity[UserFields.ID],
            email=identity[UserFields.EMAIL],
        )
