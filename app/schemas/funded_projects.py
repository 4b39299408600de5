#app/schemas/funded_projects.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.core.types import Department
from app.models.enums import AgencyType, ProjectCategory, ProjectStatus, ProjectType
from app.schemas.common import (
    CamelModel,
    Comments,
    ContactPerson,
    Deliverable,
    Email,
    Milestone,
    Money,
    Title,
    UserRef,
)


class FundingAgency(CamelModel):
    name: str = Field(..., min_length=1)
    type: Optional[AgencyType] = None
    country: Optional[str] = None
    website: Optional[str] = None
    contact_person: Optional[ContactPerson] = None


class CoInvestigator(CamelModel):
    faculty: Optional[UserRef] = None
    name: Optional[str] = None
    email: Optional[Email] = None
    share: Optional[Money] = None


class TeamMember(CamelModel):
    faculty: Optional[UserRef] = None
    name: Optional[str] = None
    email: Optional[Email] = None
    role: Optional[str] = None
    share: Optional[Money] = None


class ExternalCollaborator(CamelModel):
    name: str = Field(..., min_length=1)
    affiliation: Optional[str] = None
    email: Optional[Email] = None
    country: Optional[str] = None
    role: Optional[str] = None


class FundedProjectCreate(CamelModel):
    title: Title
    description: Optional[str] = None
    abstract: Optional[str] = None
    project_type: ProjectType
    category: Optional[ProjectCategory] = None

    funding_agency: FundingAgency
    total_budget: Money
    currency: str = "PKR"
    university_share: Money = 0
    faculty_share: Money = 0

    co_principal_investigators: List[CoInvestigator] = Field(default_factory=list)
    team_members: List[TeamMember] = Field(default_factory=list)
    external_collaborators: List[ExternalCollaborator] = Field(default_factory=list)

    department: Department

    start_date: datetime
    end_date: datetime
    duration: int = Field(..., ge=1, description="months")

    status: ProjectStatus = ProjectStatus.PROPOSED
    submitted_date: Optional[datetime] = None

    deliverables: List[Deliverable] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    expected_outcomes: List[str] = Field(default_factory=list)
    actual_outcomes: List[str] = Field(default_factory=list)
    project_website: Optional[str] = None
    notes: Optional[str] = None
    is_public: bool = True


class FundedProjectReview(CamelModel):
    status: ProjectStatus
    review_comments: Optional[Comments] = None
