"""Task attachment endpoints. Only file metadata is stored here."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from teamcollab.dependencies import get_current_user, get_task_service
from teamcollab.models import User
from teamcollab.schemas import AttachmentCreate, AttachmentResponse
from teamcollab.services import TaskService

router = APIRouter()


@router.get("/{task_id}/attachments", response_model=List[AttachmentResponse])
def list_task_attachments(task_id: int, tasks: TaskService = Depends(get_task_service)):
    return tasks.get_attachments(task_id)


@router.post("/{task_id}/attachments", response_model=AttachmentResponse)
def create_attachment(
    task_id: int,
    attachment_in: AttachmentCreate,
    tasks: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    return tasks.add_attachment(task_id, current_user.id, attachment_in)


@router.delete("/{task_id}/attachments/{attachment_id}")
def delete_attachment(task_id: int, attachment_id: int, tasks: TaskService = Depends(get_task_service)):
    tasks.delete_attachment(task_id, attachment_id)
    return Response(status_code=status.HTTP_200_OK)
