"""Tasks, their assignees, and the comments and attachments hanging off them."""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from teamcollab.errors import NotFoundError, ValidationError
from teamcollab.models import Attachment, Comment, Project, Task, TaskPriority, TaskStatus, User
from teamcollab.models.task import DEFAULT_PRIORITY, DEFAULT_STATUS
from teamcollab.repositories import (
    AttachmentRepository,
    CommentRepository,
    ProjectRepository,
    TaskRepository,
    UserRepository,
)
from teamcollab.schemas import AttachmentCreate, TaskCreate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status", "priority", "start_date", "due_date")
NON_NULL_FIELDS = ("title", "status", "priority")


class TaskService:
    def __init__(self, db: Session):
        self.db = db
        self.tasks = TaskRepository(db)
        self.projects = ProjectRepository(db)
        self.users = UserRepository(db)
        self.comments = CommentRepository(db)
        self.attachments = AttachmentRepository(db)

    # Queries

    def get_all(self) -> List[Task]:
        return self.tasks.list_all()

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def get_by_project(self, project_id: int) -> List[Task]:
        return self.tasks.list_by_project(project_id)

    def get_by_assignee(self, user_id: int) -> List[Task]:
        return self.tasks.list_by_assignee(user_id)

    def get_by_project_and_status(self, project_id: int, status: TaskStatus) -> List[Task]:
        return self.tasks.list_by_project_and_status(project_id, status)

    def get_by_project_and_priority(self, project_id: int, priority: TaskPriority) -> List[Task]:
        return self.tasks.list_by_project_and_priority(project_id, priority)

    def get_due_by(self, due_date: date) -> List[Task]:
        """Tasks whose due date is on or before ``due_date``."""
        return self.tasks.list_due_by(due_date)

    # Lookups that must succeed

    def _require(self, task_id: int, for_update: bool = False) -> Task:
        task = self.tasks.get(task_id, for_update=for_update)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    def _require_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def _require_project(self, project_id: int) -> Project:
        project = self.projects.get(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    # Commands

    def create(self, task_in: TaskCreate, creator_id: int, project_id: int) -> Task:
        creator = self._require_user(creator_id)
        project = self._require_project(project_id)
        task = Task(
            title=task_in.title,
            description=task_in.description,
            status=task_in.status or DEFAULT_STATUS,
            priority=task_in.priority or DEFAULT_PRIORITY,
            start_date=task_in.start_date,
            due_date=task_in.due_date,
            project=project,
            created_by=creator,
        )
        self.tasks.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.info("User %s created task %r in project id=%s", creator.username, task.title, project.id)
        return task

    def update(self, task_id: int, fields: Dict[str, Any]) -> Task:
        task = self._require(task_id)
        for field in UPDATABLE_FIELDS:
            if field not in fields:
                continue
            value = fields[field]
            if field in NON_NULL_FIELDS and value is None:
                raise ValidationError(f"{field} cannot be null")
            setattr(task, field, value)
        self.db.commit()
        self.db.refresh(task)
        return task

    def update_status(self, task_id: int, status: TaskStatus) -> Task:
        task = self._require(task_id)
        task.status = status
        self.db.commit()
        self.db.refresh(task)
        return task

    def delete(self, task_id: int) -> None:
        task = self._require(task_id)
        self.tasks.delete(task)
        self.db.commit()
        logger.info("Deleted task id=%s", task_id)

    def add_assignee(self, task_id: int, user_id: int) -> Task:
        task = self._require(task_id, for_update=True)
        user = self._require_user(user_id)
        if task.add_assignee(user):
            logger.info("Assigned user id=%s to task id=%s", user_id, task_id)
        self.db.commit()
        self.db.refresh(task)
        return task

    def remove_assignee(self, task_id: int, user_id: int) -> Task:
        task = self._require(task_id, for_update=True)
        user = self._require_user(user_id)
        if task.remove_assignee(user):
            logger.info("Unassigned user id=%s from task id=%s", user_id, task_id)
        self.db.commit()
        self.db.refresh(task)
        return task

    # Comments

    def get_comments(self, task_id: int) -> List[Comment]:
        self._require(task_id)
        return self.comments.list_by_task(task_id)

    def add_comment(self, task_id: int, author_id: int, content: str) -> Comment:
        task = self._require(task_id)
        author = self._require_user(author_id)
        content = (content or "").strip()
        if not content:
            raise ValidationError("Comment content cannot be empty")
        comment = Comment(task=task, author=author, content=content)
        self.comments.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def delete_comment(self, task_id: int, comment_id: int) -> None:
        self._require(task_id)
        comment = self.comments.get_for_task(task_id, comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        self.comments.delete(comment)
        self.db.commit()

    # Attachments

    def get_attachments(self, task_id: int) -> List[Attachment]:
        self._require(task_id)
        return self.attachments.list_by_task(task_id)

    def add_attachment(self, task_id: int, uploader_id: int, attachment_in: AttachmentCreate) -> Attachment:
        task = self._require(task_id)
        uploader = self._require_user(uploader_id)
        attachment = Attachment(
            task=task,
            uploaded_by=uploader,
            file_name=attachment_in.file_name,
            file_url=attachment_in.file_url,
            content_type=attachment_in.content_type,
            file_size=attachment_in.file_size,
        )
        self.attachments.add(attachment)
        self.db.commit()
        self.db.refresh(attachment)
        logger.info("Attached %r to task id=%s", attachment.file_name, task_id)
        return attachment

    def delete_attachment(self, task_id: int, attachment_id: int) -> None:
        self._require(task_id)
        attachment = self.attachments.get_for_task(task_id, attachment_id)
        if attachment is None:
            raise NotFoundError("Attachment", attachment_id)
        self.attachments.delete(attachment)
        self.db.commit()
