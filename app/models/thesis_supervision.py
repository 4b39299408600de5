# app/models/thesis_supervision.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, ReviewMixin, months_between, ref_ids

# status -> completion percentage
STATUS_PROGRESS = {
    "Proposed": 5,
    "Approved": 10,
    "Course Work": 20,
    "Research Proposal": 30,
    "Data Collection": 50,
    "Analysis": 70,
    "Writing": 85,
    "Submitted": 90,
    "Under Review": 95,
    "Defended": 98,
    "Completed": 100,
    "Graduated": 100,
}


class ThesisSupervision(RecordMixin, ReviewMixin, Base):
    __tablename__ = "thesis_supervisions"

    user_refs = ("supervisor", "coSupervisor", "reviewedBy")
    nested_user_refs = (("supervisoryCommittee", "member"),)
    display_names = {"supervisorName": "supervisor"}

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    abstract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    thesis_type: Mapped[str] = mapped_column(String(16), nullable=False)
    degree: Mapped[str] = mapped_column(String(16), nullable=False)

    # {name, rollNumber, email, phone, batch, department, cgpa, admissionDate}
    student: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)

    supervisor: Mapped[str] = mapped_column(String(36), nullable=False)
    co_supervisor: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    external_supervisor: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    # [{member, name, designation, affiliation, role, email}]
    supervisory_committee: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expected_completion_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    actual_completion_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    submission_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    defense_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Proposed")

    research_area: Mapped[str] = mapped_column(String(100), nullable=False)
    research_methodology: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    objectives: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    research_questions: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    milestones: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    # {date, time, venue, examiners, result, comments, recommendations}
    defense: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    evaluation: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    funding: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    research_areas: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    thesis_repository: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_thesis_status", "status"),
        Index("ix_thesis_supervisor", "supervisor"),
        Index("ix_thesis_start", "start_date"),
    )

    @property
    def owner_id(self) -> str:
        return self.supervisor

    @property
    def department(self) -> Optional[str]:
        return (self.student or {}).get("department")

    def has_edit_rights(self, user_id: str) -> bool:
        return (
            user_id == self.supervisor
            or (self.co_supervisor is not None and user_id == self.co_supervisor)
            or user_id in ref_ids(self.supervisory_committee, "member")
        )

    def virtuals(self) -> Dict[str, Any]:
        end = self.actual_completion_date or self.expected_completion_date
        return {
            "durationInMonths": months_between(self.start_date, end),
            "completionPercentage": STATUS_PROGRESS.get(self.status, 0),
        }
