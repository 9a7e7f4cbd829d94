"""Schemas for tasks"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from teamcollab.models.task import TaskPriority, TaskStatus
from teamcollab.schemas.base import CamelModel
from teamcollab.schemas.user import UserSummary


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    # None means "use the default" (TODO / MEDIUM)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    project_id: int


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None


class TaskStatusUpdate(CamelModel):
    status: TaskStatus


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    project_id: int
    created_by: Optional[UserSummary] = None
    assignees: List[UserSummary] = []
    created_at: datetime
    updated_at: datetime
