# app/models/final_year_project.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, ReviewMixin, elapsed_percentage, months_between

DONE_STATUSES = {"Completed", "Defended", "Graded"}


class FinalYearProject(RecordMixin, ReviewMixin, Base):
    __tablename__ = "final_year_projects"

    user_refs = ("supervisor", "coSupervisor", "reviewedBy")
    display_names = {"supervisorName": "supervisor"}

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    abstract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    project_type: Mapped[str] = mapped_column(String(32), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # {name, rollNumber, email, phone, batch, degree, department, cgpa}
    student: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)

    supervisor: Mapped[str] = mapped_column(String(36), nullable=False)
    co_supervisor: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    external_supervisor: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    submission_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    defense_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Proposed")

    # {isFunded, fundingAgency, grantNumber, amount, currency, fundingType}
    funding: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    objectives: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    methodology: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    deliverables: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    # {supervisorMarks, externalMarks, defenseMarks, totalMarks, grade, comments, evaluators}
    evaluation: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    technologies: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    research_areas: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    project_repository: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    demo_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    outcomes: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_fyp_status", "status"),
        Index("ix_fyp_supervisor", "supervisor"),
        Index("ix_fyp_start", "start_date"),
    )

    @property
    def owner_id(self) -> str:
        return self.supervisor

    @property
    def department(self) -> Optional[str]:
        return (self.student or {}).get("department")

    def has_edit_rights(self, user_id: str) -> bool:
        return user_id == self.supervisor or (
            self.co_supervisor is not None and user_id == self.co_supervisor
        )

    def virtuals(self) -> Dict[str, Any]:
        if self.status in DONE_STATUSES:
            completion = 100
        elif self.status == "In Progress":
            completion = elapsed_percentage(self.start_date, self.end_date)
        else:
            completion = 0
        return {
            "durationInMonths": months_between(self.start_date, self.end_date),
            "completionPercentage": completion,
        }
