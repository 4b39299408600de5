from __future__ import annotations

import copy
import math
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple

from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

MONTH = timedelta(days=30)


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Any) -> Optional[datetime]:
    """Coerce a stored datetime or ISO string (JSON sub-objects) to aware UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iso(value: Optional[datetime]) -> Optional[str]:
    dt = as_utc(value)
    return dt.isoformat() if dt else None


def months_between(start: Any, end: Any) -> Optional[int]:
    s, e = as_utc(start), as_utc(end)
    if not s or not e:
        return None
    return math.ceil(abs(e - s) / MONTH)


def elapsed_percentage(start: Any, end: Any, now: Optional[datetime] = None) -> float:
    """Share of [start, end] already elapsed, clamped to 0..100."""
    s, e = as_utc(start), as_utc(end)
    if not s or not e or e == s:
        return 0
    now = now or utcnow()
    pct = (now - s) / (e - s) * 100
    return min(max(pct, 0), 100)


def ref_ids(items: Optional[Iterable[Dict[str, Any]]], key: str) -> set:
    return {str(i.get(key)) for i in (items or []) if isinstance(i, dict) and i.get(key)}


class RecordMixin:
    """
    Identity + timestamps shared by every stored record, plus the
    serialization contract used by the API and the report assembler.

    - ``user_refs``: serialized keys holding weak User references
    - ``nested_user_refs``: (list key, item key) pairs for references inside JSON arrays
    - ``display_names``: virtual name key -> user ref key it is derived from
    """

    user_refs: ClassVar[Tuple[str, ...]] = ()
    nested_user_refs: ClassVar[Tuple[Tuple[str, str], ...]] = ()
    display_names: ClassVar[Dict[str, str]] = {}

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    def virtuals(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for col in self.__table__.columns:
            value = getattr(self, col.key)
            if isinstance(value, datetime):
                value = iso(value)
            elif isinstance(value, (dict, list)):
                value = copy.deepcopy(value)
            out[to_camel(col.key)] = value
        out.update(self.virtuals())
        return out


class ReviewMixin:
    """Reviewer stamp; only the workflow service writes these columns."""

    reviewed_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    review_comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    review_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    rejected_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


REVIEW_FIELDS = frozenset(
    {"reviewedBy", "reviewComments", "reviewDate", "approvedDate", "rejectedDate", "approvedBy"}
)
