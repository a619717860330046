"""Storage access for users and tasks."""
from usertask_api.repositories.task_repository import TaskRepository
from usertask_api.repositories.user_repository import UserRepository

__all__ = ["TaskRepository", "UserRepository"]
