# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.auth_dto import CurrentUser
from ...domain.exceptions import AuthError
from ...di.container import get_container

logger = logging.getLogger(__name__)

# Accepts both "Bearer <token>" and a bare token in the Authorization header
security_scheme = APIKeyHeader(name="Authorization", auto_error=False)

BEARER_PREFIX = "bearer "


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of an Authorization header value, or None if empty"""
    if not authorization:
        return None
    value = authorization.strip()
    if value.lower().startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):].strip()
    return value or None


async def get_current_user(
    authorization: Optional[str] = Depends(security_scheme),
) -> CurrentUser:
    """
    FastAPI dependency to get current authenticated user from the access token

    Args:
        authorization: Raw Authorization header value

    Returns:
        CurrentUser with the identity carried by the token

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    token = extract_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided."
        )

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(token)
    except AuthError as exception:
        logger.debug(f"Rejected token: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token."
        )
