from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from app.core.security import MIN_PASSWORD_LENGTH
from app.core.types import Department, Designation, UserRole
from app.schemas.common import CamelModel, Email, Orcid


class LoginRequest(CamelModel):
    email: Email
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: Email
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    department: Optional[Department] = None
    designation: Optional[Designation] = None


class ProfileUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    department: Optional[Department] = None
    designation: Optional[Designation] = None
    phone: Optional[str] = None
    orcid_id: Optional[Orcid] = None
    bio: Optional[str] = Field(default=None, max_length=2000)
    research_interests: Optional[List[str]] = None


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class ResetPasswordRequest(CamelModel):
    new_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class UserCreate(RegisterRequest):
    role: UserRole = UserRole.faculty
    is_active: bool = True
    employee_id: Optional[str] = None
    phone: Optional[str] = None
    orcid_id: Optional[Orcid] = None


class UserUpdate(ProfileUpdate):
    email: Optional[Email] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    employee_id: Optional[str] = None
