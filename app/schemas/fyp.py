#app/schemas/fyp.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.core.types import Department
from app.models.enums import FypCategory, FypDegree, FypStatus, FypType, Grade, SponsorType
from app.schemas.common import (
    CamelModel,
    Deliverable,
    Email,
    Marks,
    Money,
    Title,
    UserRef,
)


class Student(CamelModel):
    name: str = Field(..., min_length=1)
    roll_number: str = Field(..., min_length=3, max_length=20)
    email: Email
    phone: Optional[str] = None
    batch: str = Field(..., min_length=2, max_length=10)
    degree: FypDegree
    department: Department
    cgpa: Optional[float] = Field(default=None, ge=0, le=4)


class ExternalSupervisor(CamelModel):
    name: Optional[str] = None
    affiliation: Optional[str] = None
    email: Optional[Email] = None
    phone: Optional[str] = None
    designation: Optional[str] = None
    country: Optional[str] = None


class StudentFunding(CamelModel):
    is_funded: bool = False
    funding_agency: Optional[str] = None
    grant_number: Optional[str] = None
    amount: Optional[Money] = None
    currency: str = "PKR"
    funding_type: Optional[SponsorType] = None


class Evaluator(CamelModel):
    name: Optional[str] = None
    designation: Optional[str] = None
    affiliation: Optional[str] = None
    email: Optional[Email] = None


class Evaluation(CamelModel):
    supervisor_marks: Optional[Marks] = None
    external_marks: Optional[Marks] = None
    defense_marks: Optional[Marks] = None
    total_marks: Optional[float] = Field(default=None, ge=0)
    grade: Optional[Grade] = None
    comments: Optional[str] = None
    evaluators: List[Evaluator] = Field(default_factory=list)


class FypCreate(CamelModel):
    title: Title
    description: Optional[str] = None
    abstract: Optional[str] = None
    project_type: FypType
    category: Optional[FypCategory] = None

    student: Student
    co_supervisor: Optional[UserRef] = None
    external_supervisor: Optional[ExternalSupervisor] = None

    start_date: datetime
    end_date: datetime
    submission_date: Optional[datetime] = None
    defense_date: Optional[datetime] = None

    status: FypStatus = FypStatus.PROPOSED

    funding: Optional[StudentFunding] = None
    objectives: List[str] = Field(default_factory=list)
    methodology: Optional[str] = None
    deliverables: List[Deliverable] = Field(default_factory=list)
    evaluation: Optional[Evaluation] = None

    technologies: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    project_repository: Optional[str] = None
    demo_url: Optional[str] = None
    outcomes: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    is_public: bool = True


class GradeRequest(CamelModel):
    supervisor_marks: Optional[Marks] = None
    external_marks: Optional[Marks] = None
    defense_marks: Optional[Marks] = None
    grade: Grade
    comments: Optional[str] = None
