"""Task routes.

Endpoints (all require the user-id header):
- GET /tasks?userId=: List the user's tasks, newest first
- GET /tasks/{id}?userId=: Get one task owned by userId
- POST /tasks: Create a task
- PUT /tasks/{id}: Partially update a task (body carries userId)
- DELETE /tasks/{id}?userId=: Delete a task owned by userId

Ownership is checked against the explicit userId, not the header.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_create_task, get_delete_task, get_get_tasks, get_update_task
from api.models import (
    CreateTaskRequest,
    TaskResponse,
    UpdateTaskRequest,
    to_task_response,
)
from api.security import get_current_user_required
from domain.model.errors import TaskNotFoundError, ValidationError
from services.task_service import CreateTask, DeleteTask, GetTasks, UpdateTask

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(get_current_user_required)],
)


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    user_id: str | None = Query(None, alias="userId"),
    get_tasks: GetTasks = Depends(get_get_tasks),
):
    """List all tasks of a user."""
    tasks = get_tasks.execute(user_id)
    return [to_task_response(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    user_id: str | None = Query(None, alias="userId"),
    get_tasks: GetTasks = Depends(get_get_tasks),
):
    """Get a single task; 404 if missing, 403 if owned by someone else."""
    task = get_tasks.execute_get_by_id_with_auth(task_id, user_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return to_task_response(task)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    request: CreateTaskRequest,
    create: CreateTask = Depends(get_create_task),
):
    """Create a new task for request.userId."""
    task = create.execute(request.to_domain())
    return to_task_response(task)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    update: UpdateTask = Depends(get_update_task),
):
    """Update title, description and/or completed of a task."""
    data = request.to_domain()
    if data.is_empty:
        raise ValidationError("No fields provided to update")

    task = update.execute_with_auth(task_id, request.user_id, data)
    return to_task_response(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    user_id: str | None = Query(None, alias="userId"),
    delete: DeleteTask = Depends(get_delete_task),
):
    """Delete a task."""
    delete.execute_with_auth(task_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
