"""
Pydantic schemas for request/response validation
"""
from teamcollab.schemas.user import (
    AdminUserCreate,
    AuthResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserSummary,
    UserUpdate,
)
from teamcollab.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from teamcollab.schemas.task import TaskCreate, TaskResponse, TaskStatusUpdate, TaskUpdate
from teamcollab.schemas.comment import CommentCreate, CommentResponse
from teamcollab.schemas.attachment import AttachmentCreate, AttachmentResponse

__all__ = [
    "AdminUserCreate",
    "AuthResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserSummary",
    "UserUpdate",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "TaskCreate",
    "TaskResponse",
    "TaskStatusUpdate",
    "TaskUpdate",
    "CommentCreate",
    "CommentResponse",
    "AttachmentCreate",
    "AttachmentResponse",
]
