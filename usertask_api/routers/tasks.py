"""Task router for the UserTask API."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from usertask_api.db.config import get_session
from usertask_api.middleware.auth import CurrentUser, get_current_user
from usertask_api.schemas.auth import MessageResponse
from usertask_api.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from usertask_api.services.errors import TaskError, TaskErrorKind
from usertask_api.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


def task_error_to_http(error: TaskError) -> HTTPException:
    if error.kind == TaskErrorKind.NOT_FOUND:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    # UNKNOWN_OWNER and VALIDATION are both bad input
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)


@router.post("", response_model=MessageResponse)
async def create_task(
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Create a new task for a user."""
    try:
        service.create_task(
            owner_id=task_data.user_id,
            title=task_data.title,
            description=task_data.description,
            status=task_data.status,
            due_date=task_data.due_date,
        )
    except TaskError as e:
        raise task_error_to_http(e)
    return MessageResponse(message="Task created successfully.")


@router.get("/{user_id}", response_model=List[TaskResponse])
async def list_tasks(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Get all tasks for a user."""
    try:
        tasks = service.list_tasks_for_user(user_id)
    except TaskError as e:
        raise task_error_to_http(e)
    return [TaskResponse.from_task(task) for task in tasks]


@router.put("/{task_id}", response_model=MessageResponse)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Update the title, status or due date of a task."""
    try:
        service.update_task(
            task_id=task_id,
            title=task_data.title,
            status=task_data.status,
            due_date=task_data.due_date,
        )
    except TaskError as e:
        raise task_error_to_http(e)
    return MessageResponse(message="Task updated successfully.")


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task by ID."""
    try:
        service.delete_task(task_id)
    except TaskError as e:
        raise task_error_to_http(e)
    return MessageResponse(message="Task deleted successfully.")
