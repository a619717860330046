# tests/test_task_service.py

from __future__ import annotations

import pytest
from sqlmodel import Session, select

from usertask_api.models.task import Task, TaskStatus
from usertask_api.models.user import User
from usertask_api.repositories.user_repository import UserRepository
from usertask_api.services.account_service import AccountService
from usertask_api.services.errors import TaskError, TaskErrorKind, ValidationErrorKind
from usertask_api.services.task_service import TaskService
from usertask_api.services.task_validator import TaskValidator


@pytest.fixture()
def ann(account_service: AccountService) -> User:
    return account_service.register("Ann", "ann@x.com", "secret1")


def _create(task_service: TaskService, owner_id: int, **overrides) -> Task:
    fields = {
        "title": "Buy milk",
        "description": "Semi-skimmed",
        "status": "NotStarted",
        "due_date": "25-12-2024 15:30:00",
    }
    fields.update(overrides)
    return task_service.create_task(owner_id, **fields)


def test_create_task_for_unknown_owner_persists_nothing(
    task_service: TaskService, session: Session
) -> None:
    with pytest.raises(TaskError) as exc_info:
        _create(task_service, 42)

    assert exc_info.value.kind == TaskErrorKind.UNKNOWN_OWNER
    assert session.exec(select(Task)).all() == []


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"status": "Done"}, ValidationErrorKind.BAD_STATUS),
        ({"due_date": "2024-12-25 15:30:00"}, ValidationErrorKind.BAD_DATE_FORMAT),
        ({"due_date": ""}, ValidationErrorKind.BAD_DATE_FORMAT),
        ({"title": " "}, ValidationErrorKind.BLANK_TITLE),
    ],
)
def test_create_task_rejects_invalid_fields(
    task_service: TaskService, session: Session, ann: User, overrides: dict, expected
) -> None:
    with pytest.raises(TaskError) as exc_info:
        _create(task_service, ann.id, **overrides)

    assert exc_info.value.kind == TaskErrorKind.VALIDATION
    assert exc_info.value.validation.kind == expected
    assert session.exec(select(Task)).all() == []


def test_description_is_optional(task_service: TaskService, ann: User) -> None:
    task = _create(task_service, ann.id, description=None)
    assert task.description is None


def test_list_tasks_for_user_without_tasks_is_not_found(
    task_service: TaskService, ann: User
) -> None:
    with pytest.raises(TaskError) as exc_info:
        task_service.list_tasks_for_user(ann.id)
    assert exc_info.value.kind == TaskErrorKind.NOT_FOUND


def test_list_tasks_only_returns_owned_tasks(
    task_service: TaskService, account_service: AccountService, ann: User
) -> None:
    bob = account_service.register("Bob", "bob@x.com", "secret1")
    _create(task_service, ann.id, title="Ann's task")
    _create(task_service, bob.id, title="Bob's task")

    assert [t.title for t in task_service.list_tasks_for_user(ann.id)] == ["Ann's task"]


def test_status_only_update_leaves_other_fields(
    task_service: TaskService, session: Session, ann: User
) -> None:
    task = _create(task_service, ann.id)

    task_service.update_task(task.id, status="Completed")
    session.expire_all()
    stored = task_service.get_task_by_id(task.id)

    assert stored.status == TaskStatus.COMPLETED
    assert stored.title == "Buy milk"
    assert TaskValidator.format_due_date(stored.due_date) == "25-12-2024 15:30:00"


def test_update_with_malformed_date_writes_nothing(
    task_service: TaskService, session: Session, ann: User
) -> None:
    task = _create(task_service, ann.id)

    with pytest.raises(TaskError) as exc_info:
        task_service.update_task(
            task.id, title="Buy oat milk", status="Completed", due_date="31-02-2024 99:00:00"
        )
    session.expire_all()
    stored = task_service.get_task_by_id(task.id)

    assert exc_info.value.kind == TaskErrorKind.VALIDATION
    assert stored.title == "Buy milk"
    assert stored.status == TaskStatus.NOT_STARTED


def test_any_status_may_follow_any_other(task_service: TaskService, ann: User) -> None:
    task = _create(task_service, ann.id, status="Completed")

    for label in ["NotStarted", "Pending", "Started", "Completed", "NotStarted"]:
        assert task_service.update_task(task.id, status=label).status == TaskStatus(label)


def test_update_without_changes_skips_the_write(
    task_service: TaskService, ann: User, monkeypatch: pytest.MonkeyPatch
) -> None:
    task = _create(task_service, ann.id)
    writes: list[Task] = []
    monkeypatch.setattr(task_service.tasks, "update_task", writes.append)

    unchanged = task_service.update_task(task.id, title="", status=None, due_date="")

    assert writes == []
    assert unchanged.title == "Buy milk"
    assert unchanged.status == TaskStatus.NOT_STARTED


def test_update_due_date(task_service: TaskService, ann: User) -> None:
    task = _create(task_service, ann.id)
    updated = task_service.update_task(task.id, due_date="01-01-2025 08:00:00")
    assert TaskValidator.format_due_date(updated.due_date) == "01-01-2025 08:00:00"


def test_update_and_delete_unknown_task_are_not_found(task_service: TaskService) -> None:
    with pytest.raises(TaskError) as update_error:
        task_service.update_task(999, status="Completed")
    with pytest.raises(TaskError) as delete_error:
        task_service.delete_task(999)

    assert update_error.value.kind == TaskErrorKind.NOT_FOUND
    assert delete_error.value.kind == TaskErrorKind.NOT_FOUND


def test_task_lifecycle(task_service: TaskService, ann: User) -> None:
    _create(task_service, ann.id, description=None)

    tasks = task_service.list_tasks_for_user(ann.id)
    assert len(tasks) == 1
    assert tasks[0].status == TaskStatus.NOT_STARTED

    task_id = tasks[0].id
    task_service.update_task(task_id, status="Completed")
    assert task_service.get_task_by_id(task_id).title == "Buy milk"

    task_service.delete_task(task_id)
    assert task_service.get_task_by_id(task_id) is None
    with pytest.raises(TaskError) as exc_info:
        task_service.list_tasks_for_user(ann.id)
    assert exc_info.value.kind == TaskErrorKind.NOT_FOUND


def test_deleting_user_removes_their_tasks(
    task_service: TaskService, session: Session, ann: User
) -> None:
    _create(task_service, ann.id)
    _create(task_service, ann.id, title="Second")

    assert UserRepository(session).delete_user(ann.id) is True

    assert session.exec(select(Task)).all() == []
    assert UserRepository(session).user_exists(ann.id) is False
    assert UserRepository(session).delete_user(ann.id) is False
