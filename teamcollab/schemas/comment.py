"""Schemas for task comments"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from teamcollab.schemas.base import CamelModel
from teamcollab.schemas.user import UserSummary


class CommentCreate(CamelModel):
    content: str = Field(..., min_length=1)


class CommentResponse(CamelModel):
    id: int
    task_id: int
    content: str
    author: Optional[UserSummary] = None
    created_at: datetime
