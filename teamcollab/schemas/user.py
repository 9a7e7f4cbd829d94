"""Schemas for users and authentication"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from teamcollab.models.user import UserRole
from teamcollab.schemas.base import CamelModel


class UserSummary(CamelModel):
    id: int
    username: str
    name: Optional[str] = None
    email: str
    role: UserRole


class UserResponse(UserSummary):
    created_at: datetime
    updated_at: datetime


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, max_length=255)


class AdminUserCreate(UserCreate):
    role: UserRole = UserRole.MEMBER


class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None


class UserLogin(CamelModel):
    username: str
    password: str


class AuthResponse(CamelModel):
    token: str
    user: UserResponse
