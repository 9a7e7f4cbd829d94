from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from teamcollab.database import get_db
from teamcollab.errors import AuthError
from teamcollab.models import User
from teamcollab.services import ProjectService, TaskService, UserService

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    users: UserService = Depends(get_user_service),
) -> User:
    """Resolve the ``Authorization: Bearer`` token to a stored user."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Unauthenticated request.")
    return users.resolve_token(credentials.credentials)
