# app/models/event.py
from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, ReviewMixin, as_utc, ref_ids


class Event(RecordMixin, ReviewMixin, Base):
    __tablename__ = "events"

    user_refs = ("organizer", "reviewedBy")
    nested_user_refs = (("coOrganizers", "faculty"),)
    display_names = {"organizerName": "organizer"}

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    abstract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    event_type: Mapped[str] = mapped_column(String(32), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    organizer: Mapped[str] = mapped_column(String(36), nullable=False)
    # [{faculty, name, email, role}]
    co_organizers: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    external_organizers: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    department: Mapped[str] = mapped_column(String(64), nullable=False)
    event_format: Mapped[str] = mapped_column(String(16), nullable=False)
    venue: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    online_platform: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    start_time: Mapped[str] = mapped_column(String(20), nullable=False)
    end_time: Mapped[str] = mapped_column(String(20), nullable=False)
    timezone: Mapped[str] = mapped_column(String(32), nullable=False, default="UTC")

    # {isRequired, registrationDeadline, maxParticipants, registrationFee, currency, registrationUrl}
    registration: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    speakers: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    # [{id, name, email, affiliation, registrationDate, attendanceStatus}]
    participants: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Planned")

    funding: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    research_areas: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    event_website: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_events_status", "status"),
        Index("ix_events_organizer", "organizer"),
        Index("ix_events_type", "event_type"),
        Index("ix_events_start", "start_date"),
    )

    @property
    def owner_id(self) -> str:
        return self.organizer

    def has_edit_rights(self, user_id: str) -> bool:
        return user_id == self.organizer or user_id in ref_ids(self.co_organizers, "faculty")

    def virtuals(self) -> Dict[str, Any]:
        participants = self.participants or []
        s, e = as_utc(self.start_date), as_utc(self.end_date)
        hours = math.ceil(abs(e - s).total_seconds() / 3600) if s and e else None
        attended = sum(1 for p in participants if p.get("attendanceStatus") == "Attended")
        return {
            "durationInHours": hours,
            "totalParticipants": len(participants),
            "attendanceRate": round(attended / len(participants) * 100) if participants else 0,
        }
