from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from teamcollab.models import Project, User


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProjectRepository:
    def __init__(self, session: Session):
        self.session = session

    def _query(self):
        return self.session.query(Project).options(
            selectinload(Project.members),
            selectinload(Project.created_by),
        )

    def list_all(self) -> List[Project]:
        return self._query().order_by(Project.id).all()

    def query_by_id(self, project_id: int, for_update: bool = False):
        query = self._query().filter(Project.id == project_id)
        if for_update:
            query = query.with_for_update().populate_existing()
        return query

    def get(self, project_id: int, for_update: bool = False) -> Optional[Project]:
        return self.query_by_id(project_id, for_update=for_update).first()

    def list_by_member(self, user_id: int) -> List[Project]:
        return (
            self._query()
            .filter(Project.members.any(User.id == user_id))
            .order_by(Project.id)
            .all()
        )

    def list_by_creator(self, user_id: int) -> List[Project]:
        return self._query().filter(Project.created_by_id == user_id).order_by(Project.id).all()

    def search_by_name(self, fragment: str) -> List[Project]:
        pattern = f"%{_escape_like(fragment)}%"
        return (
            self._query()
            .filter(Project.name.ilike(pattern, escape="\\"))
            .order_by(Project.id)
            .all()
        )

    def add(self, project: Project) -> Project:
        self.session.add(project)
        self.session.flush()
        return project

    def delete(self, project: Project) -> None:
        self.session.delete(project)
        self.session.flush()
