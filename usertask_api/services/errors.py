"""Domain errors raised by the UserTask services.

Every error carries a ``kind`` enum so the HTTP layer can map it to a
status code without string matching, and a human readable ``message``.
"""
from enum import Enum
from typing import Optional


class UserTaskError(Exception):
    """Base class for all domain errors."""

    def __init__(self, kind: Enum, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class ValidationErrorKind(str, Enum):
    BAD_DATE_FORMAT = "bad_date_format"
    BAD_STATUS = "bad_status"
    BLANK_TITLE = "blank_title"


class AuthErrorKind(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"


class AccountErrorKind(str, Enum):
    EMAIL_TAKEN = "email_taken"
    USER_NOT_FOUND = "user_not_found"


class TaskErrorKind(str, Enum):
    UNKNOWN_OWNER = "unknown_owner"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class ValidationError(UserTaskError):
    """A task field failed to parse or validate."""

    kind: ValidationErrorKind


class AuthError(UserTaskError):
    """Credentials or a session token were rejected."""

    kind: AuthErrorKind


class AccountError(UserTaskError):
    kind: AccountErrorKind


class TaskError(UserTaskError):
    """A task operation failed; VALIDATION errors wrap the cause."""

    kind: TaskErrorKind

    def __init__(
        self,
        kind: TaskErrorKind,
        message: str,
        validation: Optional[ValidationError] = None,
    ):
        super().__init__(kind, message)
        self.validation = validation

    @classmethod
    def from_validation(cls, error: ValidationError) -> "TaskError":
        return cls(TaskErrorKind.VALIDATION, error.message, validation=error)
