# app/services/user_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.core.security import hash_password
from app.models.user import User
from app.policies.rbac import Principal
from app.schemas.auth import ResetPasswordRequest, UserCreate, UserUpdate
from app.services.auth_service import ensure_email_free
from app.services.query import Page, Pagination, paginate, text_search
from app.services.records import to_column

logger = logging.getLogger(__name__)


def get(db: Session, user_id: str) -> User:
    user = db.get(User, str(user_id))
    if user is None:
        raise NotFound("User not found")
    return user


def list_users(
    db: Session,
    *,
    pagination: Pagination,
    department: Optional[str] = None,
    role: Optional[str] = None,
    search: Optional[str] = None,
) -> Page:
    stmt = select(User)
    if department:
        stmt = stmt.where(User.department == department)
    if role:
        stmt = stmt.where(User.role == role)
    matched = text_search((User.first_name, User.last_name, User.email), search)
    if matched is not None:
        stmt = stmt.where(matched)
    stmt = stmt.order_by(User.created_at.desc())
    return paginate(db, stmt, pagination)


def create(db: Session, *, principal: Principal, req: UserCreate) -> User:
    ensure_email_free(db, req.email)
    user = User(password_hash=hash_password(req.password))
    for name in type(req).model_fields:
        if name == "password":
            continue
        setattr(user, name, to_column(getattr(req, name)))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user created", extra={"user_id": user.id, "actor_id": principal.user_id})
    return user


def update(db: Session, *, user_id: str, principal: Principal, req: UserUpdate) -> User:
    user = get(db, user_id)
    if "email" in req.model_fields_set and req.email:
        ensure_email_free(db, req.email, exclude_id=user.id)
    for name in req.model_fields_set:
        value = getattr(req, name)
        if value is None and name in ("email", "role", "is_active"):
            continue
        setattr(user, name, to_column(value))
    db.commit()
    db.refresh(user)
    logger.info("user updated", extra={"user_id": user.id, "actor_id": principal.user_id})
    return user


def delete(db: Session, *, user_id: str, principal: Principal) -> None:
    user = get(db, user_id)
    if user.id == principal.user_id:
        raise ValidationError("You cannot delete your own account")
    db.delete(user)
    db.commit()
    logger.info("user deleted", extra={"user_id": user_id, "actor_id": principal.user_id})


def reset_password(
    db: Session, *, user_id: str, principal: Principal, req: ResetPasswordRequest
) -> None:
    user = get(db, user_id)
    user.password_hash = hash_password(req.new_password)
    db.commit()
    logger.info("password reset", extra={"user_id": user.id, "actor_id": principal.user_id})


def stats(db: Session) -> Dict[str, Any]:
    def count(*clauses) -> int:
        stmt = select(func.count()).select_from(User)
        if clauses:
            stmt = stmt.where(*clauses)
        return db.execute(stmt).scalar_one()

    def grouped(column) -> Dict[str, int]:
        rows = db.execute(select(column, func.count()).group_by(column)).all()
        return {str(k): n for k, n in rows if k is not None}

    return {
        "total": count(),
        "faculty": count(User.role == "faculty"),
        "admin": count(User.role == "admin"),
        "active": count(User.is_active.is_(True)),
        "byDepartment": grouped(User.department),
        "byRole": grouped(User.role),
    }
