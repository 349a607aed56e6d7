# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from ..domain.exceptions import AuthError
from ..domain.constants import UserFields

# bcrypt only reads this many bytes of input; newer releases raise instead of truncating
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Passwords longer than BCRYPT_MAX_PASSWORD_BYTES are truncated, the same
    way verify_password truncates them.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError, AttributeError):
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a signed JWT token

    The exp/iat claims are only added when ACCESS_TOKEN_EXPIRE_MINUTES is
    positive, so without expiry the same payload always yields the same token.

    Args:
        payload: Dictionary containing token claims (e.g., sub, email)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    token_payload = dict(payload)

    if settings.access_token_expire_minutes > 0:
        issued_at = int(time.time())
        token_payload["iat"] = issued_at
        token_payload["exp"] = issued_at + settings.access_token_expire_minutes * 60

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        AuthError: If token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise AuthError(f"Invalid token: {str(e)}")


def issue_token(user_id: str, email: str) -> str:
    """Issue an access token identifying a user."""
    return create_jwt_token({
        "sub": user_id,
        UserFields.EMAIL: email,
    })


def verify_token(token: str) -> Dict[str, str]:
    """
    Verify an access token and extract the user identity

    Returns:
        Dictionary with "id" and "email"

    Raises:
        AuthError: If the token is invalid or lacks the identity claims
    """
    payload = decode_jwt_token(token)

    user_id = payload.get("sub")
    email = payload.get(UserFields.EMAIL)
    if not user_id or not email:
        raise AuthError("Invalid authentication payload: missing user identity")

    return {UserFields.ID: str(user_id), UserFields.EMAIL: str(email)}
