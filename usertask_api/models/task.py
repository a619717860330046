"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, Enum as SAEnum, ForeignKey, Integer
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from usertask_api.models.user import User


class TaskStatus(str, Enum):
    """Lifecycle labels a task can carry. Any label may follow any other."""

    NOT_STARTED = "NotStarted"
    STARTED = "Started"
    PENDING = "Pending"
    COMPLETED = "Completed"


class Task(SQLModel, table=True):
    """Task entity representing a to-do item owned by a single user."""

    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            index=True,
            nullable=False,
        )
    )
    title: str = Field(max_length=200, min_length=1)
    description: Optional[str] = Field(default=None, max_length=1000)
    due_date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    # Stored as the label string, e.g. "NotStarted"
    status: TaskStatus = Field(
        sa_column=Column(
            SAEnum(
                TaskStatus,
                values_callable=lambda statuses: [s.value for s in statuses],
                native_enum=False,
                length=20,
            ),
            nullable=False,
        )
    )

    # Relationships
    user: Optional["User"] = Relationship(back_populates="tasks")
