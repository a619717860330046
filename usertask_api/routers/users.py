"""User router: registration, login and user listings."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from typing import List
import logging

from usertask_api.config import Settings, get_settings
from usertask_api.db.config import get_session
from usertask_api.middleware.auth import CurrentUser, get_current_user, get_token_service
from usertask_api.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from usertask_api.schemas.user import UserWithTasksResponse
from usertask_api.services.account_service import AccountService
from usertask_api.services.errors import AccountError, AccountErrorKind, AuthError
from usertask_api.services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def get_account_service(
    session: Session = Depends(get_session),
    token_service: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
) -> AccountService:
    """Dependency for getting AccountService instance."""
    return AccountService(session, token_service, settings)


@router.post("/register", response_model=MessageResponse)
async def register(
    request: RegisterRequest,
    service: AccountService = Depends(get_account_service),
):
    """Register a new user."""
    try:
        service.register(name=request.name, email=request.email, password=request.password)
    except AccountError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SQLAlchemyError as e:
        service.session.rollback()
        logger.error(f"Failed to create user: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        )

    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: AccountService = Depends(get_account_service),
):
    """Log in and receive a bearer token valid for one hour."""
    try:
        token = service.login(email=request.email, password=request.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(token=token)


@router.get("", response_model=List[UserWithTasksResponse])
async def list_users(
    current_user: CurrentUser = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
):
    """List every user with their tasks. Dates are shown in the display time zone."""
    users = service.list_users_with_tasks()
    return [UserWithTasksResponse.from_user(user, settings.display_timezone) for user in users]


@router.get("/{user_id}", response_model=UserWithTasksResponse)
async def get_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
):
    """Get a single user with their tasks."""
    try:
        user = service.get_user(user_id)
    except AccountError as e:
        code = (
            status.HTTP_404_NOT_FOUND
            if e.kind == AccountErrorKind.USER_NOT_FOUND
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=e.message)
    return UserWithTasksResponse.from_user(user, settings.display_timezone)
