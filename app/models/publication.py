# app/models/publication.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.mixins import RecordMixin, ReviewMixin, ref_ids


class Publication(RecordMixin, ReviewMixin, Base):
    __tablename__ = "publications"

    user_refs = ("submittedBy", "reviewedBy")
    nested_user_refs = (("authors", "faculty"),)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    abstract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    publication_type: Mapped[str] = mapped_column(String(32), nullable=False)

    # External identifiers
    doi: Mapped[Optional[str]] = mapped_column(String(128), nullable=True, unique=True)
    isbn: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    issn: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # Venue
    journal_name: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    conference_name: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    publisher: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    volume: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    issue: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    pages: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    publication_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    acceptance_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    submission_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # [{faculty, name, email, affiliation, isCorrespondingAuthor, authorOrder}]
    authors: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    external_authors: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    department: Mapped[str] = mapped_column(String(64), nullable=False)

    citation_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    impact_factor: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    h_index: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    quartile: Mapped[Optional[str]] = mapped_column(String(2), nullable=True)

    keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    categories: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    pdf_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    funding_agencies: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Draft")
    submitted_by: Mapped[str] = mapped_column(String(36), nullable=False)

    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    language: Mapped[str] = mapped_column(String(32), nullable=False, default="English")
    country: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_publications_status", "status"),
        Index("ix_publications_submitted_by", "submitted_by"),
        Index("ix_publications_date", "publication_date"),
    )

    @property
    def owner_id(self) -> str:
        return self.submitted_by

    def has_edit_rights(self, user_id: str) -> bool:
        return user_id == self.submitted_by or user_id in ref_ids(self.authors, "faculty")

    def virtuals(self) -> Dict[str, Any]:
        authors = self.authors or []
        external = self.external_authors or []
        return {
            "totalAuthors": len(authors) + len(external),
            "facultyAuthors": [a for a in authors if a.get("faculty")],
            "correspondingAuthors": [
                a for a in [*authors, *external] if a.get("isCorrespondingAuthor")
            ],
        }
