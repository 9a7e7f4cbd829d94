from teamcollab.services.user_service import UserService
from teamcollab.services.project_service import ProjectService
from teamcollab.services.task_service import TaskService

__all__ = ["UserService", "ProjectService", "TaskService"]
