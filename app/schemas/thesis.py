#app/schemas/thesis.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.core.types import Department
from app.models.enums import CommitteeRole, DefenseResult, Grade, ThesisDegree, ThesisStatus
from app.schemas.common import CamelModel, Email, Marks, Milestone, TimeOfDay, Title, UserRef
from app.schemas.fyp import ExternalSupervisor, StudentFunding


class ThesisStudent(CamelModel):
    name: str = Field(..., min_length=1)
    roll_number: str = Field(..., min_length=3, max_length=20)
    email: Email
    phone: Optional[str] = None
    batch: str = Field(..., min_length=2, max_length=10)
    department: Department
    cgpa: Optional[float] = Field(default=None, ge=0, le=4)
    admission_date: Optional[datetime] = None


class CommitteeMember(CamelModel):
    member: Optional[UserRef] = None
    name: Optional[str] = None
    designation: Optional[str] = None
    affiliation: Optional[str] = None
    role: Optional[CommitteeRole] = None
    email: Optional[Email] = None


class Examiner(CamelModel):
    name: Optional[str] = None
    designation: Optional[str] = None
    affiliation: Optional[str] = None
    email: Optional[Email] = None
    role: Optional[CommitteeRole] = None


class Defense(CamelModel):
    date: Optional[datetime] = None
    time: Optional[TimeOfDay] = None
    venue: Optional[str] = Field(default=None, min_length=2, max_length=100)
    examiners: List[Examiner] = Field(default_factory=list)
    result: Optional[DefenseResult] = None
    comments: Optional[str] = None
    recommendations: List[str] = Field(default_factory=list)


class StageEvaluation(CamelModel):
    marks: Optional[Marks] = None
    comments: Optional[str] = None
    date: Optional[datetime] = None


class ThesisEvaluation(CamelModel):
    supervisor_evaluation: Optional[StageEvaluation] = None
    committee_evaluation: Optional[StageEvaluation] = None
    defense_evaluation: Optional[StageEvaluation] = None
    final_grade: Optional[Grade] = None


class ThesisCreate(CamelModel):
    title: Title
    abstract: Optional[str] = None
    thesis_type: ThesisDegree
    degree: ThesisDegree

    student: ThesisStudent
    co_supervisor: Optional[UserRef] = None
    external_supervisor: Optional[ExternalSupervisor] = None
    supervisory_committee: List[CommitteeMember] = Field(default_factory=list)

    start_date: datetime
    expected_completion_date: datetime
    actual_completion_date: Optional[datetime] = None
    submission_date: Optional[datetime] = None
    defense_date: Optional[datetime] = None

    status: ThesisStatus = ThesisStatus.PROPOSED

    research_area: str = Field(..., min_length=2, max_length=100)
    research_methodology: Optional[str] = None
    objectives: List[str] = Field(default_factory=list)
    research_questions: List[str] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)

    defense: Optional[Defense] = None
    evaluation: Optional[ThesisEvaluation] = None
    funding: Optional[StudentFunding] = None

    keywords: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    thesis_repository: Optional[str] = None
    notes: Optional[str] = None
    is_public: bool = True


class DefenseRequest(CamelModel):
    date: datetime
    time: TimeOfDay
    venue: str = Field(..., min_length=2, max_length=100)
    examiners: List[Examiner] = Field(default_factory=list)
    result: Optional[DefenseResult] = None
    comments: Optional[str] = None
    recommendations: List[str] = Field(default_factory=list)
