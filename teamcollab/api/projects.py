"""Project endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from teamcollab.dependencies import get_current_user, get_project_service
from teamcollab.errors import NotFoundError, empty_response
from teamcollab.models import User
from teamcollab.schemas import ProjectCreate, ProjectResponse, ProjectUpdate
from teamcollab.services import ProjectService

router = APIRouter()


@router.get("", response_model=List[ProjectResponse])
def list_projects(projects: ProjectService = Depends(get_project_service)):
    return projects.get_all()


@router.get("/my", response_model=List[ProjectResponse])
def my_projects(
    projects: ProjectService = Depends(get_project_service),
    current_user: User = Depends(get_current_user),
):
    """Projects the caller is a member of."""
    return projects.get_by_member(current_user.id)


@router.get("/created", response_model=List[ProjectResponse])
def created_projects(
    projects: ProjectService = Depends(get_project_service),
    current_user: User = Depends(get_current_user),
):
    return projects.get_by_creator(current_user.id)


@router.get("/search", response_model=List[ProjectResponse])
def search_projects(name: str = Query(...), projects: ProjectService = Depends(get_project_service)):
    """Case-insensitive substring match on the project name."""
    return projects.search_by_name(name)


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, projects: ProjectService = Depends(get_project_service)):
    project = projects.get_by_id(project_id)
    if project is None:
        raise NotFoundError("Project", project_id)
    return project


@router.post("", response_model=ProjectResponse)
def create_project(
    project_in: ProjectCreate,
    projects: ProjectService = Depends(get_project_service),
    current_user: User = Depends(get_current_user),
):
    try:
        return projects.create(project_in, current_user.id)
    except NotFoundError:
        return empty_response(status.HTTP_400_BAD_REQUEST)


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    project_update: ProjectUpdate,
    projects: ProjectService = Depends(get_project_service),
):
    return projects.update(project_id, project_update.model_dump(exclude_unset=True))


@router.delete("/{project_id}")
def delete_project(project_id: int, projects: ProjectService = Depends(get_project_service)):
    projects.delete(project_id)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{project_id}/members/{user_id}", response_model=ProjectResponse)
def add_member(project_id: int, user_id: int, projects: ProjectService = Depends(get_project_service)):
    try:
        return projects.add_member(project_id, user_id)
    except NotFoundError:
        return empty_response(status.HTTP_400_BAD_REQUEST)


@router.delete("/{project_id}/members/{user_id}", response_model=ProjectResponse)
def remove_member(project_id: int, user_id: int, projects: ProjectService = Depends(get_project_service)):
    try:
        return projects.remove_member(project_id, user_id)
    except NotFoundError:
        return empty_response(status.HTTP_400_BAD_REQUEST)
