from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from teamcollab.models import Task, TaskPriority, TaskStatus, User


class TaskRepository:
    def __init__(self, session: Session):
        self.session = session

    def _query(self):
        return self.session.query(Task).options(
            selectinload(Task.assignees),
            selectinload(Task.created_by),
        )

    def list_all(self) -> List[Task]:
        return self._query().order_by(Task.id).all()

    def query_by_id(self, task_id: int, for_update: bool = False):
        query = self._query().filter(Task.id == task_id)
        if for_update:
            query = query.with_for_update().populate_existing()
        return query

    def get(self, task_id: int, for_update: bool = False) -> Optional[Task]:
        return self.query_by_id(task_id, for_update=for_update).first()

    def list_by_project(self, project_id: int) -> List[Task]:
        return self._query().filter(Task.project_id == project_id).order_by(Task.id).all()

    def list_by_assignee(self, user_id: int) -> List[Task]:
        return (
            self._query()
            .filter(Task.assignees.any(User.id == user_id))
            .order_by(Task.id)
            .all()
        )

    def list_by_project_and_status(self, project_id: int, status: TaskStatus) -> List[Task]:
        return (
            self._query()
            .filter(Task.project_id == project_id, Task.status == status)
            .order_by(Task.id)
            .all()
        )

    def list_by_project_and_priority(self, project_id: int, priority: TaskPriority) -> List[Task]:
        return (
            self._query()
            .filter(Task.project_id == project_id, Task.priority == priority)
            .order_by(Task.id)
            .all()
        )

    def list_due_by(self, due_date: date) -> List[Task]:
        # tasks without a due date never match
        return (
            self._query()
            .filter(Task.due_date.isnot(None), Task.due_date <= due_date)
            .order_by(Task.due_date, Task.id)
            .all()
        )

    def add(self, task: Task) -> Task:
        self.session.add(task)
        self.session.flush()
        return task

    def delete(self, task: Task) -> None:
        self.session.delete(task)
        self.session.flush()
