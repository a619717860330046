"""User storage operations."""
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select
from typing import List, Optional

from usertask_api.models.task import Task
from usertask_api.models.user import User


class UserRepository:
    """Each method is a single unit of work; not-found is ``None``."""

    def __init__(self, session: Session):
        self.session = session

    def insert_user(self, user: User) -> int:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user.id

    def find_user_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        statement = (
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.tasks))
        )
        return self.session.exec(statement).first()

    def list_users_with_tasks(self) -> List[User]:
        statement = select(User).options(selectinload(User.tasks)).order_by(User.id)
        return list(self.session.exec(statement).all())

    def user_exists(self, user_id: int) -> bool:
        statement = select(User.id).where(User.id == user_id)
        return self.session.exec(statement).first() is not None

    def delete_user(self, user_id: int) -> bool:
        """Delete a user and all of their tasks in one transaction."""
        user = self.session.get(User, user_id)
        if not user:
            return False

        tasks = self.session.exec(select(Task).where(Task.user_id == user_id)).all()
        for task in tasks:
            self.session.delete(task)
        self.session.flush()
        self.session.expire(user, ["tasks"])
        self.session.delete(user)
        self.session.commit()
        return True
