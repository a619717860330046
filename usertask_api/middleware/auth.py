"""JWT authentication dependency for FastAPI."""
from fastapi import HTTPException, Depends, status, Request
from pydantic import BaseModel
from typing import Optional

from usertask_api.config import Settings, get_settings
from usertask_api.services.errors import AuthError
from usertask_api.services.token_service import TokenService


class CurrentUser(BaseModel):
    """User information extracted from JWT."""
    user_id: int
    email: Optional[str] = None


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    """Dependency for getting TokenService instance."""
    return TokenService(settings)


async def get_current_user(
    request: Request,
    token_service: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Validate JWT token from Authorization header and extract user information.

    Args:
        request: FastAPI request object to extract Authorization header
        token_service: Verifies signature, issuer, audience and expiry

    Returns:
        CurrentUser with user_id and email from token

    Raises:
        HTTPException: If token is missing, invalid or expired
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = auth_header[7:]  # Remove "Bearer " prefix

    try:
        claims = token_service.validate(token)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return CurrentUser(user_id=claims.user_id, email=claims.email)
