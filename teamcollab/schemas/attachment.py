"""Schemas for task attachments"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from teamcollab.schemas.base import CamelModel
from teamcollab.schemas.user import UserSummary


class AttachmentCreate(CamelModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_url: Optional[str] = Field(None, max_length=1024)
    content_type: Optional[str] = Field(None, max_length=255)
    file_size: Optional[int] = Field(None, ge=0)


class AttachmentResponse(CamelModel):
    id: int
    task_id: int
    file_name: str
    file_url: Optional[str] = None
    content_type: Optional[str] = None
    file_size: Optional[int] = None
    uploaded_by: Optional[UserSummary] = None
    created_at: datetime
