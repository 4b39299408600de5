#app/policies/rbac.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Set

from app.core.errors import Forbidden
from app.core.types import UserRole


@dataclass(frozen=True)
class Principal:
    user_id: str
    role: UserRole
    email: str
    display_name: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin


# --- Core action constants ---
ACTION_REVIEW_RECORD = "REVIEW_RECORD"
ACTION_VIEW_USER_STATS = "VIEW_USER_STATS"


def allowed_actions(role: UserRole) -> Set[str]:
    """
    Pure RBAC: which privileged actions a role may attempt.
    Everything not listed here is owner-scoped (see ownership_policy).
    """

    if role == UserRole.admin:
        return {
            ACTION_REVIEW_RECORD,
            ACTION_VIEW_USER_STATS,
        }

    return set()


def require_action(principal: Principal, action: str) -> None:
    if action not in allowed_actions(principal.role):
        raise Forbidden(f"User role {principal.role.value} is not authorized to access this route")


def require_admin(principal: Principal) -> None:
    if not principal.is_admin:
        raise Forbidden(f"User role {principal.role.value} is not authorized to access this route")
