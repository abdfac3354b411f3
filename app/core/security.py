"""
JWT issuance and validation.

Tokens are HS256-signed with settings.JWT_SECRET_KEY and carry the username in "sub".
"""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

from fastapi import Header, HTTPException, status
from jose import JWTError, jwt
from pydantic import BaseModel

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class TokenData(BaseModel):
    """Claims extracted from a validated access token."""

    sub: str
    exp: Optional[datetime] = None


def create_access_token(username: str, expires_minutes: Optional[int] = None) -> str:
    """
    Issue a signed access token for username.

    Args:
        username: Subject of the token
        expires_minutes: Lifetime override (defaults to settings.JWT_EXPIRE_MINUTES)
    """
    lifetime = expires_minutes if expires_minutes is not None else settings.JWT_EXPIRE_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=lifetime)
    claims = {"sub": username, "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Validate a token and return its claims.

    Raises:
        JWTError: if the signature, expiry or claims are invalid
    """
    payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    subject = payload.get("sub")
    if not subject:
        raise JWTError("Token has no subject")
    exp = payload.get("exp")
    return TokenData(
        sub=subject,
        exp=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Annotated[Optional[str], Header()] = None,
) -> TokenData:
    """
    Resolve the caller from the Authorization header.

    Raises:
        HTTPException: 401 if the header is missing, malformed, or the token is invalid
    """
    if not authorization:
        raise _unauthorized("Missing auth token")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise _unauthorized("Invalid token format")

    try:
        return decode_access_token(parts[1])
    except JWTError as e:
        logger.warning(f"Rejected access token: {e}")
        raise _unauthorized("Invalid token")
