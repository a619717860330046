"""Task Validator."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import re

from usertask_api.models.task import TaskStatus
from usertask_api.services.errors import ValidationError, ValidationErrorKind

DUE_DATE_FORMAT = "%d-%m-%Y %H:%M:%S"
DUE_DATE_DISPLAY = "dd-MM-yyyy HH:mm:ss"

# strptime alone accepts unpadded fields ("1-2-2024 3:04:05") and non-ASCII digits
_DUE_DATE_PATTERN = re.compile(r"^[0-9]{2}-[0-9]{2}-[0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2}$")


@dataclass(frozen=True)
class TaskChanges:
    """Validated partial update. ``None`` means leave the field unchanged."""

    title: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.status is None and self.due_date is None


class TaskValidator:
    """Validate task fields arriving at the boundary."""

    @staticmethod
    def parse_due_date(raw: Optional[str]) -> datetime:
        """
        Parse a due date in ``dd-MM-yyyy HH:mm:ss`` format.

        Args:
            raw: Date string, interpreted as UTC

        Returns:
            Timezone-aware UTC datetime

        Raises:
            ValidationError: BAD_DATE_FORMAT if the string does not match exactly
        """
        message = f"Invalid date format. Use '{DUE_DATE_DISPLAY}'."
        if not raw or not _DUE_DATE_PATTERN.match(raw):
            raise ValidationError(ValidationErrorKind.BAD_DATE_FORMAT, message)
        try:
            parsed = datetime.strptime(raw, DUE_DATE_FORMAT)
        except ValueError:
            # Out of range values such as "31-02-2024 99:00:00"
            raise ValidationError(ValidationErrorKind.BAD_DATE_FORMAT, message)
        return parsed.replace(tzinfo=timezone.utc)

    @staticmethod
    def format_due_date(value: datetime) -> str:
        """Render a timestamp in the boundary format. Naive values are UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime(DUE_DATE_FORMAT)

    @staticmethod
    def validate_status(raw: Optional[str]) -> TaskStatus:
        """
        Match a status label case-sensitively.

        Raises:
            ValidationError: BAD_STATUS for anything but the four labels
        """
        for status in TaskStatus:
            if raw == status.value:
                return status
        allowed = ", ".join(s.value for s in TaskStatus)
        raise ValidationError(
            ValidationErrorKind.BAD_STATUS,
            f"Invalid status value. Status must be one of: {allowed}",
        )

    @staticmethod
    def validate_title(raw: Optional[str]) -> str:
        if raw is None or not raw.strip():
            raise ValidationError(ValidationErrorKind.BLANK_TITLE, "Title is required.")
        return raw

    @staticmethod
    def validate_update(
        title: Optional[str] = None,
        status: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> TaskChanges:
        """
        Validate every supplied field of a partial update.

        Absent (``None``) and empty fields are left unchanged. The first
        invalid field aborts the whole update, so callers never apply a
        half-valid change.

        Returns:
            TaskChanges holding only the fields to apply
        """
        return TaskChanges(
            title=TaskValidator.validate_title(title) if title else None,
            status=TaskValidator.validate_status(status) if status else None,
            due_date=TaskValidator.parse_due_date(due_date) if due_date else None,
        )
