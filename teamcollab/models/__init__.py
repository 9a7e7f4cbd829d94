"""TeamCollab Database Models"""
from teamcollab.models.user import User, UserRole
from teamcollab.models.project import Project, project_members
from teamcollab.models.task import Task, TaskStatus, TaskPriority, task_assignees
from teamcollab.models.comment import Comment
from teamcollab.models.attachment import Attachment

__all__ = [
    "User",
    "UserRole",
    "Project",
    "project_members",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "task_assignees",
    "Comment",
    "Attachment",
]
