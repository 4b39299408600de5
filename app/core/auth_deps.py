#app/core/auth_deps.py
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.errors import Unauthorized
from app.core.security import decode_token
from app.core.types import UserRole
from app.db.session import get_db
from app.models.user import User
from app.policies.rbac import Principal

bearer = HTTPBearer(auto_error=False)


def get_current_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to an active User row.

    Guarantees:
    - JWT is present, valid and unexpired
    - the subject still exists and is active
    """
    if creds is None or not creds.credentials:
        raise Unauthorized("Not authorized, no token provided")

    payload = decode_token(creds.credentials)
    user_id = payload.get("user_id") or payload.get("sub")
    if not user_id:
        raise Unauthorized("Not authorized, token failed")

    user = db.get(User, str(user_id))
    if user is None:
        raise Unauthorized("Not authorized, user not found")
    if not user.is_active:
        raise Unauthorized("Account is deactivated")
    return user


def get_current_principal(
    request: Request,
    user: User = Depends(get_current_user),
) -> Principal:
    try:
        role = UserRole(user.role)
    except ValueError:
        raise Unauthorized("Not authorized, token failed")

    principal = Principal(
        user_id=user.id,
        role=role,
        email=user.email,
        display_name=user.full_name,
    )

    # Make principal available to the access log
    request.state.principal = principal
    return principal
