"""Task endpoints"""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from teamcollab.dependencies import get_current_user, get_task_service
from teamcollab.errors import NotFoundError, empty_response
from teamcollab.models import TaskPriority, TaskStatus, User
from teamcollab.schemas import TaskCreate, TaskResponse, TaskStatusUpdate, TaskUpdate
from teamcollab.services import TaskService

router = APIRouter()


@router.get("", response_model=List[TaskResponse])
def list_tasks(tasks: TaskService = Depends(get_task_service)):
    return tasks.get_all()


@router.get("/my", response_model=List[TaskResponse])
def my_tasks(
    tasks: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    """Tasks assigned to the caller."""
    return tasks.get_by_assignee(current_user.id)


@router.get("/due", response_model=List[TaskResponse])
def tasks_due_by(
    due_date: date = Query(..., alias="dueDate"),
    tasks: TaskService = Depends(get_task_service),
):
    """Tasks due on or before ``dueDate`` (YYYY-MM-DD)."""
    return tasks.get_due_by(due_date)


@router.get("/project/{project_id}", response_model=List[TaskResponse])
def tasks_by_project(project_id: int, tasks: TaskService = Depends(get_task_service)):
    return tasks.get_by_project(project_id)


@router.get("/project/{project_id}/status/{task_status}", response_model=List[TaskResponse])
def tasks_by_project_and_status(
    project_id: int,
    task_status: TaskStatus,
    tasks: TaskService = Depends(get_task_service),
):
    return tasks.get_by_project_and_status(project_id, task_status)


@router.get("/project/{project_id}/priority/{priority}", response_model=List[TaskResponse])
def tasks_by_project_and_priority(
    project_id: int,
    priority: TaskPriority,
    tasks: TaskService = Depends(get_task_service),
):
    return tasks.get_by_project_and_priority(project_id, priority)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, tasks: TaskService = Depends(get_task_service)):
    task = tasks.get_by_id(task_id)
    if task is None:
        raise NotFoundError("Task", task_id)
    return task


@router.post("", response_model=TaskResponse)
def create_task(
    task_in: TaskCreate,
    tasks: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    try:
        return tasks.create(task_in, current_user.id, task_in.project_id)
    except NotFoundError:
        return empty_response(status.HTTP_400_BAD_REQUEST)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_update: TaskUpdate, tasks: TaskService = Depends(get_task_service)):
    return tasks.update(task_id, task_update.model_dump(exclude_unset=True))


@router.put("/{task_id}/status", response_model=TaskResponse)
def update_task_status(
    task_id: int,
    status_update: TaskStatusUpdate,
    tasks: TaskService = Depends(get_task_service),
):
    return tasks.update_status(task_id, status_update.status)


@router.delete("/{task_id}")
def delete_task(task_id: int, tasks: TaskService = Depends(get_task_service)):
    tasks.delete(task_id)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{task_id}/assignees/{user_id}", response_model=TaskResponse)
def add_assignee(task_id: int, user_id: int, tasks: TaskService = Depends(get_task_service)):
    try:
        return tasks.add_assignee(task_id, user_id)
    except NotFoundError:
        return empty_response(status.HTTP_400_BAD_REQUEST)


@router.delete("/{task_id}/assignees/{user_id}", response_model=TaskResponse)
def remove_assignee(task_id: int, user_id: int, tasks: TaskService = Depends(get_task_service)):
    try:
        return tasks.remove_assignee(task_id, user_id)
    except NotFoundError:
        return empty_response(status.HTTP_400_BAD_REQUEST)
