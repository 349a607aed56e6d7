# Standard library imports
import logging
from typing import Any

# External package imports
from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ...application.dto.auth_dto import LoginRequest, LoginResponse
from ...application.dto.user_dto import RegisterResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase, INVALID_CREDENTIALS_MESSAGE
from ...application.validation import validate_user
from ...domain.exceptions import AuthError, EmailAlreadyExistsError, UnexpectedError, ValidationError
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_user(payload: Any = Body(default=None)) -> Any:
    """
    Register a new user

    Args:
        payload: JSON body with email and password

    Returns:
        RegisterResponse with created user information
    """
    try:
        credentials = validate_user(payload)
    except ValidationError as exception:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exception.details},
        )

    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        user = await register_use_case.execute(credentials)
        return RegisterResponse(result=user)
    except EmailAlreadyExistsError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content="Email exist!",
        )
    except UnexpectedError as exception:
        logger.error(f"Registration failed: {exception.message}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content="Error",
        )


@router.post("/login", response_model=LoginResponse)
async def login_user(payload: Any = Body(default=None)) -> Any:
    """
    Authenticate user and get access token

    Args:
        payload: JSON body with email and password

    Returns:
        LoginResponse with access token
    """
    invalid_credentials = JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=INVALID_CREDENTIALS_MESSAGE,
    )

    # Malformed credentials get the same answer as wrong ones
    try:
        request = LoginRequest.model_validate(payload)
    except PydanticValidationError:
        return invalid_credentials

    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except AuthError:
        return invalid_credentials
    except UnexpectedError as exception:
        logger.error(f"Login failed: {exception.message}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content="Error",
        )
