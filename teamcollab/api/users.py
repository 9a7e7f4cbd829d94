"""User endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from teamcollab.dependencies import get_current_user, get_user_service
from teamcollab.errors import AuthError, NotFoundError
from teamcollab.models import User, UserRole
from teamcollab.schemas import AdminUserCreate, UserResponse, UserUpdate
from teamcollab.services import UserService

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def list_users(users: UserService = Depends(get_user_service)):
    return users.get_all()


@router.get("/me", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/check-username", response_model=bool)
def check_username(username: str = Query(...), users: UserService = Depends(get_user_service)):
    return users.exists_by_username(username)


@router.get("/check-email", response_model=bool)
def check_email(email: str = Query(...), users: UserService = Depends(get_user_service)):
    return users.exists_by_email(email)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    user = users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


@router.post("", response_model=UserResponse)
def create_user(
    user_in: AdminUserCreate,
    users: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    if current_user.role != UserRole.ADMIN:
        raise AuthError("Only administrators can create users.")
    return users.create(user_in, role=user_in.role)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_update: UserUpdate, users: UserService = Depends(get_user_service)):
    return users.update(user_id, user_update.model_dump(exclude_unset=True))


@router.delete("/{user_id}")
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    users.delete(user_id)
    return Response(status_code=status.HTTP_200_OK)
