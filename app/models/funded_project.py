# app/models/funded_project.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, ReviewMixin, elapsed_percentage, months_between, ref_ids


class FundedProject(RecordMixin, ReviewMixin, Base):
    __tablename__ = "funded_projects"

    user_refs = ("principalInvestigator", "reviewedBy")
    nested_user_refs = (("coPrincipalInvestigators", "faculty"), ("teamMembers", "faculty"))
    display_names = {"principalInvestigatorName": "principalInvestigator"}

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    abstract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    project_type: Mapped[str] = mapped_column(String(32), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # {name, type, country, website, contactPerson}
    funding_agency: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    total_budget: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(8), nullable=False, default="PKR")
    university_share: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    faculty_share: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    principal_investigator: Mapped[str] = mapped_column(String(36), nullable=False)
    # [{faculty, name, email, share}]
    co_principal_investigators: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    # [{faculty, name, email, role, share}]
    team_members: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    external_collaborators: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    department: Mapped[str] = mapped_column(String(64), nullable=False)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # months

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Proposed")
    submitted_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    deliverables: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    milestones: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    research_areas: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    expected_outcomes: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    actual_outcomes: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    project_website: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_funded_projects_status", "status"),
        Index("ix_funded_projects_pi", "principal_investigator"),
        Index("ix_funded_projects_start", "start_date"),
    )

    @property
    def owner_id(self) -> str:
        return self.principal_investigator

    @property
    def agency_name(self) -> Optional[str]:
        return (self.funding_agency or {}).get("name")

    def has_edit_rights(self, user_id: str) -> bool:
        return (
            user_id == self.principal_investigator
            or user_id in ref_ids(self.co_principal_investigators, "faculty")
            or user_id in ref_ids(self.team_members, "faculty")
        )

    def virtuals(self) -> Dict[str, Any]:
        months = months_between(self.start_date, self.end_date)
        if self.status == "Completed":
            completion = 100
        elif self.status == "Active":
            completion = elapsed_percentage(self.start_date, self.end_date)
        else:
            completion = 0
        return {
            "durationInMonths": months if months is not None else self.duration,
            "totalTeamMembers": 1
            + len(self.co_principal_investigators or [])
            + len(self.team_members or []),
            "completionPercentage": completion,
        }
