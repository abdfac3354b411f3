from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.logging import get_logger
from app.core.security import create_access_token

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    token: str


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest) -> LoginResponse:
    """
    Issue an access token.

    Credentials are not checked against a user store; any non-empty username is accepted.

    Raises:
        HTTPException: 401 if the username is empty
    """
    if not request.username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )

    token = create_access_token(request.username)
    logger.info(f"Issued access token for {request.username}")
    return LoginResponse(token=token)
