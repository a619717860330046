"""User read schemas, rendered in the display time zone."""
from pydantic import BaseModel
from typing import List, Optional

from usertask_api.models.task import Task, TaskStatus
from usertask_api.models.user import User
from usertask_api.services.task_validator import DUE_DATE_FORMAT
from usertask_api.utils.timezone import CREATED_DATE_FORMAT, to_display_zone


class UserTaskSummary(BaseModel):
    task_id: int
    title: str
    description: Optional[str]
    due_date: str
    status: str

    @classmethod
    def from_task(cls, task: Task, zone_name: str) -> "UserTaskSummary":
        return cls(
            task_id=task.id,
            title=task.title,
            description=task.description,
            due_date=to_display_zone(task.due_date, zone_name).strftime(DUE_DATE_FORMAT),
            status=TaskStatus(task.status).value,
        )


class UserWithTasksResponse(BaseModel):
    """A user and their tasks. Dates are converted for display only."""
    user_id: int
    name: str
    email: str
    created_date: str
    tasks: List[UserTaskSummary]

    @classmethod
    def from_user(cls, user: User, zone_name: str) -> "UserWithTasksResponse":
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            created_date=to_display_zone(user.created_at, zone_name).strftime(
                CREATED_DATE_FORMAT
            ),
            tasks=[UserTaskSummary.from_task(task, zone_name) for task in user.tasks],
        )
