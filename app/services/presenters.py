# app/services/presenters.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Set

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.user import User

BRIEF_FIELDS = ("firstName", "lastName", "email")


def _collect_ids(rows: Iterable[Dict[str, Any]], record_cls) -> Set[str]:
    ids: Set[str] = set()
    for row in rows:
        for key in record_cls.user_refs:
            if row.get(key):
                ids.add(str(row[key]))
        for list_key, item_key in record_cls.nested_user_refs:
            for item in row.get(list_key) or []:
                if isinstance(item, dict) and item.get(item_key):
                    ids.add(str(item[item_key]))
    return ids


def load_users(db: Session, ids: Iterable[str]) -> Dict[str, User]:
    ids = {i for i in ids if i}
    if not ids:
        return {}
    rows = db.execute(select(User).where(User.id.in_(ids))).scalars().all()
    return {u.id: u for u in rows}


def _ref(user: Optional[User], brief: bool) -> Optional[Dict[str, Any]]:
    if user is None:
        return None
    summary = user.summary()
    if brief:
        return {k: summary[k] for k in BRIEF_FIELDS}
    return summary


def present_many(db: Session, records: List[Any], *, brief: bool = False) -> List[Dict[str, Any]]:
    """
    Serialize records with weak User references replaced by the referenced
    user's summary. A reference that no longer resolves becomes ``None`` and
    any display name derived from it falls back to ``""``.
    """
    if not records:
        return []
    record_cls = type(records[0])
    rows = [r.to_dict() for r in records]
    users = load_users(db, _collect_ids(rows, record_cls))

    for row in rows:
        raw = {key: row.get(key) for key in record_cls.user_refs}
        for name_key, ref_key in record_cls.display_names.items():
            user = users.get(raw.get(ref_key)) if raw.get(ref_key) else None
            row[name_key] = user.full_name if user else ""
        for key, value in raw.items():
            if value is not None:
                row[key] = _ref(users.get(str(value)), brief)
        for list_key, item_key in record_cls.nested_user_refs:
            for item in row.get(list_key) or []:
                if isinstance(item, dict) and item.get(item_key):
                    item[item_key] = _ref(users.get(str(item[item_key])), brief)
    return rows


def present(db: Session, record: Any) -> Dict[str, Any]:
    return present_many(db, [record])[0]
