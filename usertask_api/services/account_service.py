"""Account service: registration, login and user read models."""
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from typing import List
import logging

from usertask_api.config import Settings
from usertask_api.models.user import User
from usertask_api.repositories.user_repository import UserRepository
from usertask_api.services.credential_store import hash_password, verify_password
from usertask_api.services.errors import (
    AccountError,
    AccountErrorKind,
    AuthError,
    AuthErrorKind,
)
from usertask_api.services.token_service import TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."


class AccountService:
    """Service class orchestrating credentials, tokens and user storage."""

    def __init__(self, session: Session, token_service: TokenService, settings: Settings):
        self.session = session
        self.users = UserRepository(session)
        self.token_service = token_service
        self.settings = settings

    def register(self, name: str, email: str, password: str) -> User:
        """Create a user. Emails are compared exactly, without case folding."""
        if self.users.find_user_by_email(email):
            raise AccountError(
                AccountErrorKind.EMAIL_TAKEN, "User already registered with this email."
            )

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password, rounds=self.settings.bcrypt_rounds),
        )
        try:
            self.users.insert_user(user)
        except IntegrityError:
            # A concurrent registration won the unique constraint
            self.session.rollback()
            raise AccountError(
                AccountErrorKind.EMAIL_TAKEN, "User already registered with this email."
            )

        logger.info(f"Registered user {user.id}")
        return user

    def login(self, email: str, password: str) -> str:
        """
        Exchange credentials for a session token.

        Unknown email and wrong password raise the same error so callers
        cannot tell which one was wrong.
        """
        user = self.users.find_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Login failed")
            raise AuthError(AuthErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)

        logger.info(f"User {user.id} logged in")
        return self.token_service.issue(user.id, user.email)

    def list_users_with_tasks(self) -> List[User]:
        return self.users.list_users_with_tasks()

    def get_user(self, user_id: int) -> User:
        user = self.users.find_user_by_id(user_id)
        if user is None:
            raise AccountError(AccountErrorKind.USER_NOT_FOUND, "User not found.")
        return user
