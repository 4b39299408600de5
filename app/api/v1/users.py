# app/api/v1/users.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.v1.records import list_params
from app.core.auth_deps import get_current_principal
from app.core.errors import ok
from app.db.session import get_db
from app.policies.rbac import (
    ACTION_VIEW_USER_STATS,
    Principal,
    require_action,
    require_admin,
)
from app.schemas.auth import ResetPasswordRequest, UserCreate, UserUpdate
from app.services import user_service
from app.services.query import Pagination

router = APIRouter(prefix="/users")


def user_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    require_admin(principal)
    return principal


@router.get("")
def list_users(
    pagination: Pagination = Depends(list_params),
    department: Optional[str] = Query(None),
    role: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    page = user_service.list_users(
        db, pagination=pagination, department=department, role=role, search=search
    )
    return ok({"users": [u.to_dict() for u in page.items], "pagination": page.meta()})


@router.get("/stats")
def user_stats(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    require_action(principal, ACTION_VIEW_USER_STATS)
    return ok(user_service.stats(db))


@router.get("/{user_id}")
def get_user(user_id: str, db: Session = Depends(get_db)):
    return ok({"user": user_service.get(db, user_id).to_dict()})


@router.post("", status_code=201)
def create_user(req: UserCreate, db: Session = Depends(get_db), principal: Principal = Depends(user_admin)):
    user = user_service.create(db, principal=principal, req=req)
    return ok({"user": user.to_dict()}, message="User created successfully")


@router.put("/{user_id}")
def update_user(
    user_id: str,
    req: UserUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(user_admin),
):
    user = user_service.update(db, user_id=user_id, principal=principal, req=req)
    return ok({"user": user.to_dict()}, message="User updated successfully")


@router.delete("/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db), principal: Principal = Depends(user_admin)):
    user_service.delete(db, user_id=user_id, principal=principal)
    return ok(message="User deleted successfully")


@router.put("/{user_id}/reset-password")
def reset_password(
    user_id: str,
    req: ResetPasswordRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(user_admin),
):
    user_service.reset_password(db, user_id=user_id, principal=principal, req=req)
    return ok(message="Password reset successfully")
