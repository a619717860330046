"""SQLModel table models."""
from usertask_api.models.task import Task, TaskStatus
from usertask_api.models.user import User

__all__ = ["Task", "TaskStatus", "User"]
