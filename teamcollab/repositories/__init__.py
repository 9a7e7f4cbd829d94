"""Data access for the TeamCollab models"""
from teamcollab.repositories.user_repository import UserRepository
from teamcollab.repositories.project_repository import ProjectRepository
from teamcollab.repositories.task_repository import TaskRepository
from teamcollab.repositories.comment_repository import CommentRepository
from teamcollab.repositories.attachment_repository import AttachmentRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "TaskRepository",
    "CommentRepository",
    "AttachmentRepository",
]
