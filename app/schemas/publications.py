#app/schemas/publications.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.core.types import Department
from app.models.enums import PublicationStatus, PublicationType, Quartile
from app.schemas.common import CamelModel, Comments, Email, Title, UserRef


class Author(CamelModel):
    faculty: Optional[UserRef] = None
    name: str = Field(..., min_length=1)
    email: Optional[Email] = None
    affiliation: Optional[str] = None
    is_corresponding_author: bool = False
    author_order: int = Field(..., ge=1)


class FundingAcknowledgement(CamelModel):
    agency: str = Field(..., min_length=1)
    grant_number: Optional[str] = None


class PublicationCreate(CamelModel):
    title: Title
    abstract: Optional[str] = None
    publication_type: PublicationType

    doi: Optional[str] = None
    isbn: Optional[str] = None
    issn: Optional[str] = None

    journal_name: Optional[str] = None
    conference_name: Optional[str] = None
    publisher: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None

    publication_date: datetime
    acceptance_date: Optional[datetime] = None
    submission_date: Optional[datetime] = None

    authors: List[Author] = Field(default_factory=list)
    external_authors: List[Author] = Field(default_factory=list)
    department: Department

    citation_count: int = Field(default=0, ge=0)
    impact_factor: Optional[float] = Field(default=None, ge=0)
    h_index: Optional[int] = Field(default=None, ge=0)
    quartile: Optional[Quartile] = None

    keywords: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    pdf_url: Optional[str] = None
    funding_agencies: List[FundingAcknowledgement] = Field(default_factory=list)

    status: PublicationStatus = PublicationStatus.DRAFT
    is_public: bool = True
    is_verified: bool = False
    language: str = "English"
    country: Optional[str] = None
    notes: Optional[str] = None


class PublicationReview(CamelModel):
    status: PublicationStatus
    review_comments: Optional[Comments] = None
