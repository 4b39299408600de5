#app/api/v1/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth_deps import get_current_user
from app.core.errors import ok
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import ChangePasswordRequest, LoginRequest, ProfileUpdate, RegisterRequest
from app.services import auth_service

router = APIRouter(prefix="/auth")


@router.post("/register", status_code=201)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    user = auth_service.register(db, req)
    return ok(auth_service.session_payload(user), message="User registered successfully")


@router.post("/login")
def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = auth_service.authenticate(db, req)
    return ok(auth_service.session_payload(user), message="Login successful")


@router.post("/logout")
def logout(user: User = Depends(get_current_user)):
    # tokens are stateless; the client discards its copy
    return ok(message="Logout successful")


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return ok({"user": user.to_dict()})


@router.put("/profile")
def update_profile(
    req: ProfileUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    user = auth_service.update_profile(db, user, req)
    return ok({"user": user.to_dict()}, message="Profile updated successfully")


@router.put("/change-password")
def change_password(
    req: ChangePasswordRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    auth_service.change_password(db, user, req)
    return ok(message="Password changed successfully")
