# app/services/auth_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.errors import Unauthorized, ValidationError
from app.core.security import create_access_token, hash_password, verify_password
from app.core.types import UserRole
from app.models.user import User
from app.schemas.auth import ChangePasswordRequest, LoginRequest, ProfileUpdate, RegisterRequest
from app.services.records import to_column

logger = logging.getLogger(__name__)


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(
        select(User).where(func.lower(User.email) == email.lower())
    ).scalar_one_or_none()


def ensure_email_free(db: Session, email: str, *, exclude_id: Optional[str] = None) -> None:
    existing = find_by_email(db, email)
    if existing is not None and existing.id != exclude_id:
        raise ValidationError.single("email", "User already exists with this email")


def session_payload(user: User) -> Dict[str, Any]:
    return {
        "token": create_access_token(user.id, user.role),
        "user": user.to_dict(),
    }


def register(db: Session, req: RegisterRequest) -> User:
    ensure_email_free(db, req.email)
    user = User(
        email=req.email,
        password_hash=hash_password(req.password),
        first_name=req.first_name,
        last_name=req.last_name,
        role=UserRole.faculty.value,
        department=to_column(req.department),
        designation=to_column(req.designation),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user registered", extra={"user_id": user.id})
    return user


def authenticate(db: Session, req: LoginRequest) -> User:
    user = find_by_email(db, req.email)
    if user is None or not verify_password(req.password, user.password_hash):
        logger.warning("login failed", extra={"email": req.email})
        raise Unauthorized("Invalid email or password")
    if not user.is_active:
        raise Unauthorized("Account is deactivated")
    logger.info("login", extra={"user_id": user.id})
    return user


def update_profile(db: Session, user: User, req: ProfileUpdate) -> User:
    for name in req.model_fields_set:
        setattr(user, name, to_column(getattr(req, name)))
    db.commit()
    db.refresh(user)
    return user


def change_password(db: Session, user: User, req: ChangePasswordRequest) -> None:
    if not verify_password(req.current_password, user.password_hash):
        raise ValidationError.single("currentPassword", "Current password is incorrect")
    user.password_hash = hash_password(req.new_password)
    db.commit()
    logger.info("password changed", extra={"user_id": user.id})
