# app/models/user.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin


class User(RecordMixin, Base):
    """Portal account; faculty profile fields live on the same row."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="faculty")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # 🎓 FACULTY PROFILE
    department: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    designation: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    employee_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    orcid_id: Mapped[Optional[str]] = mapped_column(String(19), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    research_interests: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        Index("ix_users_role", "role"),
        Index("ix_users_department", "department"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out.pop("passwordHash", None)
        out["fullName"] = self.full_name
        return out

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "department": self.department,
            "designation": self.designation,
        }
