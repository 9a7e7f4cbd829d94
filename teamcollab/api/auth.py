"""Login, registration and current-user endpoints"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from teamcollab import auth
from teamcollab.dependencies import get_current_user, get_user_service
from teamcollab.errors import AuthError, ValidationError, error_body
from teamcollab.models import User
from teamcollab.schemas import AuthResponse, UserCreate, UserLogin, UserResponse
from teamcollab.services import UserService

router = APIRouter()


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(token=auth.create_token_for(user.username), user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, users: UserService = Depends(get_user_service)):
    """Exchange a username and password for a bearer token."""
    try:
        user = users.authenticate(credentials.username, credentials.password)
    except AuthError as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(exc.message))
    return _auth_response(user)


@router.post("/register", response_model=AuthResponse)
def register(user_in: UserCreate, users: UserService = Depends(get_user_service)):
    """Create a MEMBER account and log it in."""
    try:
        user = users.create(user_in)
    except ValidationError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(f"Registration failed: {exc.message}"),
        )
    return _auth_response(user)


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
