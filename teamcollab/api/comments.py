"""Task comment endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from teamcollab.dependencies import get_current_user, get_task_service
from teamcollab.models import User
from teamcollab.schemas import CommentCreate, CommentResponse
from teamcollab.services import TaskService

router = APIRouter()


@router.get("/{task_id}/comments", response_model=List[CommentResponse])
def list_task_comments(task_id: int, tasks: TaskService = Depends(get_task_service)):
    """Comments on a task, oldest first."""
    return tasks.get_comments(task_id)


@router.post("/{task_id}/comments", response_model=CommentResponse)
def create_comment(
    task_id: int,
    comment_in: CommentCreate,
    tasks: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    return tasks.add_comment(task_id, current_user.id, comment_in.content)


@router.delete("/{task_id}/comments/{comment_id}")
def delete_comment(task_id: int, comment_id: int, tasks: TaskService = Depends(get_task_service)):
    tasks.delete_comment(task_id, comment_id)
    return Response(status_code=status.HTTP_200_OK)
