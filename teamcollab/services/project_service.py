import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from teamcollab.errors import NotFoundError, ValidationError
from teamcollab.models import Project, User
from teamcollab.repositories import ProjectRepository, UserRepository
from teamcollab.schemas import ProjectCreate

logger = logging.getLogger(__name__)


class ProjectService:
    """Projects and their membership.

    The creator of a project is made a member when the project is created.
    Membership changes lock the project row for the rest of the transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.projects = ProjectRepository(db)
        self.users = UserRepository(db)

    def get_all(self) -> List[Project]:
        return self.projects.list_all()

    def get_by_id(self, project_id: int) -> Optional[Project]:
        return self.projects.get(project_id)

    def get_by_member(self, user_id: int) -> List[Project]:
        return self.projects.list_by_member(user_id)

    def get_by_creator(self, user_id: int) -> List[Project]:
        return self.projects.list_by_creator(user_id)

    def search_by_name(self, fragment: str) -> List[Project]:
        return self.projects.search_by_name(fragment)

    def _require(self, project_id: int, for_update: bool = False) -> Project:
        project = self.projects.get(project_id, for_update=for_update)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    def _require_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def create(self, project_in: ProjectCreate, creator_id: int) -> Project:
        creator = self._require_user(creator_id)
        project = Project(
            name=project_in.name,
            description=project_in.description,
            color=project_in.color,
            created_by=creator,
        )
        project.add_member(creator)
        self.projects.add(project)
        self.db.commit()
        self.db.refresh(project)
        logger.info("User %s created project %s (id=%s)", creator.username, project.name, project.id)
        return project

    def update(self, project_id: int, fields: Dict[str, Any]) -> Project:
        project = self._require(project_id)
        if "name" in fields:
            if not fields["name"]:
                raise ValidationError("Project name is required")
            project.name = fields["name"]
        if "color" in fields:
            project.color = fields["color"]
        self.db.commit()
        self.db.refresh(project)
        return project

    def delete(self, project_id: int) -> None:
        project = self._require(project_id)
        task_count = len(project.tasks)
        self.projects.delete(project)
        self.db.commit()
        logger.info("Deleted project id=%s with %d task(s)", project_id, task_count)

    def add_member(self, project_id: int, user_id: int) -> Project:
        project = self._require(project_id, for_update=True)
        user = self._require_user(user_id)
        if project.add_member(user):
            logger.info("Added user id=%s to project id=%s", user_id, project_id)
        self.db.commit()
        self.db.refresh(project)
        return project

    def remove_member(self, project_id: int, user_id: int) -> Project:
        project = self._require(project_id, for_update=True)
        user = self._require_user(user_id)
        if project.created_by_id == user.id:
            raise ValidationError("The project creator cannot be removed from its members")
        if project.remove_member(user):
            logger.info("Removed user id=%s from project id=%s", user_id, project_id)
        self.db.commit()
        self.db.refresh(project)
        return project
