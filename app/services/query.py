# app/services/query.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic.alias_generators import to_snake
from sqlalchemy import Select, String, cast, func, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.core.config import get_settings


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int

    @classmethod
    def from_params(cls, page: Optional[int], limit: Optional[int]) -> "Pagination":
        """Zero, negative or missing values fall back to page 1 / the default size."""
        default_limit = get_settings().default_page_size
        return cls(
            page=page if page and page > 0 else 1,
            limit=limit if limit and limit > 0 else default_limit,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page:
    items: List[Any]
    total: int
    pagination: Pagination

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.pagination.limit)

    def meta(self) -> Dict[str, Any]:
        return {
            "currentPage": self.pagination.page,
            "totalPages": self.total_pages,
            "total": self.total,
            "hasNextPage": self.pagination.page < self.total_pages,
            "hasPrevPage": self.pagination.page > 1,
        }


def paginate(db: Session, stmt: Select, pagination: Pagination) -> Page:
    total = db.execute(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    ).scalar_one()
    items = (
        db.execute(stmt.offset(pagination.offset).limit(pagination.limit))
        .scalars()
        .all()
    )
    return Page(items=list(items), total=total, pagination=pagination)


# ─────────────────────────────────────────────
# PREDICATE HELPERS
# ─────────────────────────────────────────────


def _like_escape(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def text_search(fields: Sequence[Any], term: Optional[str]) -> Optional[ColumnElement]:
    """
    Case-insensitive substring match OR-ed across ``fields``.
    JSON list columns are matched against their serialized text.
    """
    if not term or not term.strip():
        return None
    pattern = f"%{_like_escape(term.strip())}%"
    return or_(*[_as_text(f).ilike(pattern, escape="\\") for f in fields])


def _as_text(expr: Any) -> ColumnElement:
    if isinstance(expr.type, String):
        return expr
    return cast(expr, String)


def json_text(column: Any, key: str) -> ColumnElement:
    """Top-level scalar ``key`` of a JSON object column, as text."""
    return column[key].as_string()


def mentions_id(column: Any, user_id: str) -> ColumnElement:
    """
    True when a JSON array of sub-objects references ``user_id`` anywhere.
    Ids are UUID text, so matching the quoted literal is unambiguous.
    """
    return cast(column, String).like(f'%"{_like_escape(user_id)}"%', escape="\\")


def order_clause(
    model: Any,
    sort_by: Optional[str],
    sort_order: Optional[str],
    *,
    allowed: Iterable[str],
    default: Sequence[ColumnElement],
) -> Sequence[ColumnElement]:
    """
    Caller-chosen ``sortBy`` / ``sortOrder`` for whitelisted columns, else the
    type's default ordering. Unknown columns are ignored.
    """
    if sort_by:
        key = to_snake(sort_by)
        if key in set(allowed):
            col = getattr(model, key)
            return [col.asc() if (sort_order or "").lower() == "asc" else col.desc()]
    return default
