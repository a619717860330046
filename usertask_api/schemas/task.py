"""Task schemas for the UserTask API."""
from pydantic import BaseModel, Field
from typing import Optional

from usertask_api.models.task import Task, TaskStatus
from usertask_api.services.task_validator import TaskValidator

DUE_DATE_HELP = "Format: 'dd-MM-yyyy HH:mm:ss'. Example: '25-12-2024 15:30:00'"


class TaskCreate(BaseModel):
    """Schema for creating a task."""
    user_id: int
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    status: str = Field(..., description="NotStarted, Started, Pending or Completed")
    due_date: str = Field(..., description=DUE_DATE_HELP)


class TaskUpdate(BaseModel):
    """Schema for a partial task update. Omitted or empty fields are left unchanged."""
    title: Optional[str] = Field(None, max_length=200)
    status: Optional[str] = Field(None, description="NotStarted, Started, Pending or Completed")
    due_date: Optional[str] = Field(None, description=DUE_DATE_HELP)


class TaskResponse(BaseModel):
    """Schema for task API responses; due dates are UTC."""
    task_id: int
    user_id: int
    title: str
    description: Optional[str]
    due_date: str
    status: str

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            task_id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            due_date=TaskValidator.format_due_date(task.due_date),
            status=TaskStatus(task.status).value,
        )
