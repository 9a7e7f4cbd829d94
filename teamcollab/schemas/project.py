"""Schemas for projects"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from teamcollab.schemas.base import CamelModel
from teamcollab.schemas.user import UserSummary


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = Field(None, max_length=32)


class ProjectUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    color: Optional[str] = Field(None, max_length=32)


class ProjectResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    created_by: Optional[UserSummary] = None
    members: List[UserSummary] = []
    created_at: datetime
    updated_at: datetime
