# app/models/contact.py
from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, as_utc, utcnow


class Contact(RecordMixin, Base):
    """Public inquiry submitted from the website contact form."""

    __tablename__ = "contacts"

    user_refs = ("assignedTo",)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    contact_type: Mapped[str] = mapped_column(String(32), nullable=False, default="general")
    priority: Mapped[str] = mapped_column(String(16), nullable=False, default="medium")

    organization: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    position: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default="new")
    # {message, respondedBy, respondedAt}
    response: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    assigned_to: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    source: Mapped[str] = mapped_column(String(32), nullable=False, default="website")
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    __table_args__ = (
        Index("ix_contacts_email", "email"),
        Index("ix_contacts_status", "status"),
        Index("ix_contacts_type", "contact_type"),
        Index("ix_contacts_priority", "priority"),
        Index("ix_contacts_created", "created_at"),
    )

    def virtuals(self) -> Dict[str, Any]:
        created = as_utc(self.created_at)
        days = math.ceil(abs(utcnow() - created).total_seconds() / 86400) if created else None
        return {
            "fullName": f"{self.first_name} {self.last_name}",
            "daysSinceCreation": days,
        }
