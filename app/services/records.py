# app/services/records.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.core.config import get_settings
from app.core.errors import NotFound, ValidationError, from_pydantic
from app.models.mixins import as_utc, utcnow
from app.policies.ownership_policy import require_delete, require_edit
from app.policies.rbac import ACTION_REVIEW_RECORD, Principal, require_action
from app.services import workflow
from app.services.query import Page, Pagination, order_clause, paginate, text_search

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# PAYLOAD -> COLUMNS
# ─────────────────────────────────────────────


def validate(schema: Type[BaseModel], payload: Any) -> BaseModel:
    """Run ``schema`` over a raw body, reporting every violated field at once."""
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise from_pydantic(exc)


def to_column(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [to_column(v) for v in value]
    if isinstance(value, datetime):
        return as_utc(value)
    return value


def assign(record: Any, data: BaseModel) -> None:
    for name in type(data).model_fields:
        setattr(record, name, to_column(getattr(data, name)))


def schema_keys(schema: Type[BaseModel]) -> set:
    return {f.alias or name for name, f in schema.model_fields.items()}


class RecordService:
    """
    CRUD + approve/reject shared by the six research record types.

    Subclasses bind the model, its create schema and status flow, and
    describe their list filters and stats; everything else is common.
    """

    model: ClassVar[Type[Any]]
    create_schema: ClassVar[Type[BaseModel]]
    flow: ClassVar[workflow.StatusFlow]
    owner_field: ClassVar[str]
    noun: ClassVar[str]
    sortable: ClassVar[Sequence[str]] = ("created_at", "updated_at", "title", "status")

    @property
    def label(self) -> str:
        return self.noun[:1].upper() + self.noun[1:]

    # ─────────── hooks ───────────

    def search_columns(self) -> Sequence[Any]:
        return (self.model.title,)

    def filter_clauses(self, filters: Dict[str, Any]) -> List[ColumnElement]:
        return []

    def default_order(self) -> Sequence[ColumnElement]:
        return (self.model.created_at.desc(),)

    def before_save(self, record: Any) -> None:
        """Normalize derived fields before every commit of a create/update."""

    def stats(self, db: Session) -> Dict[str, Any]:
        raise NotImplementedError

    def guard_status(self, principal: Principal, status: Enum, current: Optional[str] = None) -> None:
        """Approved and rejected families are reached only through a reviewer."""
        if principal.is_admin or status.value == current:
            return
        if status in self.flow.terminal:
            raise ValidationError.single(
                "status", f"{self.label} status '{status.value}' can only be set by a reviewer"
            )

    def merged(self, record: Any, patch: Any) -> BaseModel:
        keys = schema_keys(self.create_schema)
        body = {k: v for k, v in record.to_dict().items() if k in keys}
        if isinstance(patch, dict):
            body.update(patch)
        return validate(self.create_schema, body)

    # ─────────── reads ───────────

    def get(self, db: Session, record_id: str) -> Any:
        record = db.get(self.model, str(record_id))
        if record is None:
            raise NotFound(f"{self.label} not found")
        return record

    def list(
        self,
        db: Session,
        *,
        pagination: Pagination,
        search: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> Page:
        stmt = select(self.model)
        clauses = self.filter_clauses({k: v for k, v in (filters or {}).items() if v not in (None, "")})
        matched = text_search(self.search_columns(), search)
        if matched is not None:
            clauses.append(matched)
        if clauses:
            stmt = stmt.where(*clauses)
        stmt = stmt.order_by(
            *order_clause(
                self.model,
                sort_by,
                sort_order,
                allowed=self.sortable,
                default=self.default_order(),
            )
        )
        return paginate(db, stmt, pagination)

    # ─────────── writes ───────────

    def create(self, db: Session, *, principal: Principal, payload: Any) -> Any:
        data = validate(self.create_schema, payload)
        self.guard_status(principal, data.status)
        record = self.model(**{self.owner_field: principal.user_id})
        assign(record, data)
        self.before_save(record)
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info(
            "%s created",
            self.noun,
            extra={"record_id": record.id, "owner_id": principal.user_id},
        )
        return record

    def update(self, db: Session, *, record_id: str, principal: Principal, patch: Any) -> Any:
        """
        Stored fields overlaid by ``patch`` are validated again as a whole.
        Ownership, identity and review stamps are not part of the create
        schema, so a patch cannot touch them.
        """
        record = self.get(db, record_id)
        require_edit(principal, record, self.noun)

        data = self.merged(record, patch)
        self.guard_status(principal, data.status, current=record.status)

        assign(record, data)
        self.before_save(record)
        db.commit()
        db.refresh(record)
        logger.info(
            "%s updated",
            self.noun,
            extra={"record_id": record.id, "actor_id": principal.user_id},
        )
        return record

    def delete(self, db: Session, *, record_id: str, principal: Principal) -> None:
        record = self.get(db, record_id)
        require_delete(principal, record, self.noun)
        db.delete(record)
        db.commit()
        logger.info(
            "%s deleted",
            self.noun,
            extra={"record_id": record_id, "actor_id": principal.user_id},
        )

    # ─────────── workflow ───────────

    def approve(
        self, db: Session, *, record_id: str, principal: Principal, comments: Optional[str] = None
    ) -> Any:
        record = self.get(db, record_id)
        require_action(principal, ACTION_REVIEW_RECORD)
        return workflow.decide(
            db, record, self.flow, approve=True, reviewer=principal, comments=comments
        )

    def reject(
        self, db: Session, *, record_id: str, principal: Principal, comments: Optional[str] = None
    ) -> Any:
        record = self.get(db, record_id)
        require_action(principal, ACTION_REVIEW_RECORD)
        return workflow.decide(
            db, record, self.flow, approve=False, reviewer=principal, comments=comments
        )

    def review(
        self,
        db: Session,
        *,
        record_id: str,
        principal: Principal,
        status: Enum,
        comments: Optional[str] = None,
    ) -> Any:
        record = self.get(db, record_id)
        require_action(principal, ACTION_REVIEW_RECORD)
        self.merged(record, {"status": status.value})
        workflow.stamp_review(
            db, record, self.flow, status=status, reviewer=principal, comments=comments
        )
        self.after_review(record, status, principal)
        db.commit()
        db.refresh(record)
        return record

    def after_review(self, record: Any, status: Enum, principal: Principal) -> None:
        """Type-specific side effects of a generic review."""

    # ─────────── aggregation helpers ───────────

    def count(self, db: Session, *clauses: ColumnElement) -> int:
        stmt = select(func.count()).select_from(self.model)
        if clauses:
            stmt = stmt.where(*clauses)
        return db.execute(stmt).scalar_one()

    def count_status(self, db: Session, *statuses: str) -> int:
        return self.count(db, self.model.status.in_(statuses))

    def count_by(self, db: Session, column: Any) -> Dict[str, int]:
        rows = db.execute(
            select(column, func.count()).select_from(self.model).group_by(column)
        ).all()
        return {str(key): n for key, n in rows if key is not None}

    def count_recent(self, db: Session) -> int:
        since = utcnow() - timedelta(days=get_settings().recent_window_days)
        return self.count(db, self.model.created_at >= since)
