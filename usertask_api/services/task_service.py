"""Task service: create, list, update and delete tasks."""
from sqlmodel import Session
from typing import List, Optional
import logging

from usertask_api.models.task import Task
from usertask_api.repositories.task_repository import TaskRepository
from usertask_api.repositories.user_repository import UserRepository
from usertask_api.services.errors import TaskError, TaskErrorKind, ValidationError
from usertask_api.services.task_validator import TaskValidator

logger = logging.getLogger(__name__)


class TaskService:
    """Service class for task CRUD operations with ownership checks."""

    def __init__(self, session: Session):
        self.session = session
        self.tasks = TaskRepository(session)
        self.users = UserRepository(session)

    def create_task(
        self,
        owner_id: int,
        title: str,
        description: Optional[str],
        status: str,
        due_date: str,
    ) -> Task:
        """Create a task for an existing user."""
        if not self.users.user_exists(owner_id):
            raise TaskError(TaskErrorKind.UNKNOWN_OWNER, "Invalid UserId.")

        try:
            task = Task(
                user_id=owner_id,
                title=TaskValidator.validate_title(title),
                description=description,
                status=TaskValidator.validate_status(status),
                due_date=TaskValidator.parse_due_date(due_date),
            )
        except ValidationError as e:
            raise TaskError.from_validation(e)

        self.tasks.insert_task(task)
        logger.info(f"Created task {task.id} for user {owner_id}")
        return task

    def list_tasks_for_user(self, user_id: int) -> List[Task]:
        """
        Get all tasks owned by a user.

        An empty result is reported as NOT_FOUND, whether or not the user exists.
        """
        tasks = self.tasks.list_tasks_by_user(user_id)
        if not tasks:
            raise TaskError(TaskErrorKind.NOT_FOUND, "No tasks found for the user.")
        return tasks

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.find_task_by_id(task_id)

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        status: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> Task:
        """Apply a partial update; nothing is written unless every field validates."""
        task = self.get_task_by_id(task_id)
        if not task:
            raise TaskError(TaskErrorKind.NOT_FOUND, "Task not found.")

        try:
            changes = TaskValidator.validate_update(title=title, status=status, due_date=due_date)
        except ValidationError as e:
            raise TaskError.from_validation(e)

        if changes.is_empty:
            return task

        if changes.title is not None:
            task.title = changes.title
        if changes.status is not None:
            task.status = changes.status
        if changes.due_date is not None:
            task.due_date = changes.due_date

        self.tasks.update_task(task)
        logger.info(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> None:
        if not self.get_task_by_id(task_id):
            raise TaskError(TaskErrorKind.NOT_FOUND, "Task not found.")

        self.tasks.delete_task(task_id)
        logger.info(f"Deleted task {task_id}")
