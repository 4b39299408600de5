#/app/policies/ownership_policy.py
from __future__ import annotations

from typing import Protocol

from app.core.errors import Forbidden
from app.policies.rbac import Principal


class OwnedRecord(Protocol):
    @property
    def owner_id(self) -> str: ...

    def has_edit_rights(self, user_id: str) -> bool: ...


def can_edit(principal: Principal, record: OwnedRecord) -> bool:
    if principal.is_admin:
        return True
    return record.has_edit_rights(principal.user_id)


def can_delete(principal: Principal, record: OwnedRecord) -> bool:
    # deletion stays with the primary owner; co-owners may only edit
    if principal.is_admin:
        return True
    return record.owner_id == principal.user_id


def require_edit(principal: Principal, record: OwnedRecord, noun: str = "record") -> None:
    if not can_edit(principal, record):
        raise Forbidden(f"Not authorized to update this {noun}")


def require_delete(principal: Principal, record: OwnedRecord, noun: str = "record") -> None:
    if not can_delete(principal, record):
        raise Forbidden(f"Not authorized to delete this {noun}")
