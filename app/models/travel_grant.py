# app/models/travel_grant.py
from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, ReviewMixin, as_utc

BUDGET_ITEMS = (
    "airfare",
    "accommodation",
    "meals",
    "localTransport",
    "registrationFee",
    "visaFee",
    "other",
)


def budget_total(breakdown: Optional[Dict[str, Any]]) -> float:
    """Sum of line-item amounts; absent items and absent breakdown count as 0."""
    total = 0
    for item in BUDGET_ITEMS:
        line = (breakdown or {}).get(item) or {}
        total += line.get("amount") or 0
    return total


class TravelGrant(RecordMixin, ReviewMixin, Base):
    __tablename__ = "travel_grants"

    user_refs = ("applicant", "reviewedBy", "approvedBy")
    display_names = {"applicantName": "applicant"}

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    purpose: Mapped[str] = mapped_column(String(500), nullable=False)

    # {name, type, venue, startDate, endDate, website, organizer}
    event: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)

    applicant: Mapped[str] = mapped_column(String(36), nullable=False)
    department: Mapped[str] = mapped_column(String(64), nullable=False)

    # {departureDate, returnDate, departureCity, destinationCity, destinationCountry, ...}
    travel_details: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
    # {fundingAgency: {name, type, country, ...}, grantNumber, totalAmount, currency, ...}
    funding: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
    budget_breakdown: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Draft")
    submitted_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    # {completionDate, reportSubmitted, reportUrl, outcomes, publications, collaborations, feedback}
    post_travel: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    research_areas: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_travel_grants_status", "status"),
        Index("ix_travel_grants_applicant", "applicant"),
    )

    @property
    def owner_id(self) -> str:
        return self.applicant

    @property
    def funding_amount(self) -> float:
        return (self.funding or {}).get("totalAmount") or 0

    @property
    def agency_name(self) -> Optional[str]:
        return ((self.funding or {}).get("fundingAgency") or {}).get("name")

    def has_edit_rights(self, user_id: str) -> bool:
        return user_id == self.applicant

    def virtuals(self) -> Dict[str, Any]:
        details = self.travel_details or {}
        dep, ret = as_utc(details.get("departureDate")), as_utc(details.get("returnDate"))
        days = math.ceil(abs(ret - dep).total_seconds() / 86400) if dep and ret else None
        return {
            "travelDurationInDays": days,
            "totalBudget": budget_total(self.budget_breakdown),
        }
