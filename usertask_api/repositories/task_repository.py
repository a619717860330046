"""Task storage operations."""
from sqlmodel import Session, select
from typing import List, Optional

from usertask_api.models.task import Task


class TaskRepository:
    """Each method is a single unit of work; not-found is ``None``."""

    def __init__(self, session: Session):
        self.session = session

    def insert_task(self, task: Task) -> int:
        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        return task.id

    def find_task_by_id(self, task_id: int) -> Optional[Task]:
        return self.session.get(Task, task_id)

    def list_tasks_by_user(self, user_id: int) -> List[Task]:
        statement = select(Task).where(Task.user_id == user_id).order_by(Task.id)
        return list(self.session.exec(statement).all())

    def update_task(self, task: Task) -> None:
        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)

    def delete_task(self, task_id: int) -> bool:
        task = self.session.get(Task, task_id)
        if not task:
            return False

        self.session.delete(task)
        self.session.commit()
        return True
