#app/schemas/travel.py
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.core.types import Department
from app.models.enums import AgencyType, TravelEventType, TravelStatus
from app.schemas.common import CamelModel, Comments, ContactPerson, Email, Money, Title, Venue


class TravelEvent(CamelModel):
    name: str = Field(..., min_length=1)
    type: TravelEventType
    venue: Optional[Venue] = None
    start_date: datetime
    end_date: datetime
    website: Optional[str] = None
    organizer: Optional[str] = None


class Accommodation(CamelModel):
    name: Optional[str] = None
    address: Optional[str] = None
    cost: Optional[Money] = None
    currency: str = "PKR"


class TravelDetails(CamelModel):
    departure_date: datetime
    return_date: datetime
    departure_city: str = Field(..., min_length=1)
    destination_city: str = Field(..., min_length=1)
    destination_country: str = Field(..., min_length=1)
    transport_mode: Optional[
        Literal["Air", "Rail", "Road", "Sea", "Train", "Bus", "Car", "Other"]
    ] = None
    accommodation: Optional[Accommodation] = None


class TravelAgency(CamelModel):
    name: str = Field(..., min_length=1)
    type: Optional[AgencyType] = None
    country: Optional[str] = None
    website: Optional[str] = None
    contact_person: Optional[ContactPerson] = None


class TravelFunding(CamelModel):
    funding_agency: TravelAgency
    grant_number: Optional[str] = None
    total_amount: Money
    currency: str = "PKR"
    university_share: Money = 0
    faculty_share: Money = 0
    external_share: Money = 0


class BudgetLine(CamelModel):
    amount: Optional[Money] = None
    currency: str = "PKR"
    description: Optional[str] = None


class BudgetBreakdown(CamelModel):
    airfare: Optional[BudgetLine] = None
    accommodation: Optional[BudgetLine] = None
    meals: Optional[BudgetLine] = None
    local_transport: Optional[BudgetLine] = None
    registration_fee: Optional[BudgetLine] = None
    visa_fee: Optional[BudgetLine] = None
    other: Optional[BudgetLine] = None


class Collaboration(CamelModel):
    name: Optional[str] = None
    affiliation: Optional[str] = None
    email: Optional[Email] = None
    country: Optional[str] = None


class TravelFeedback(CamelModel):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comments: Optional[str] = None
    date: Optional[datetime] = None


class PostTravel(CamelModel):
    completion_date: Optional[datetime] = None
    report_submitted: bool = False
    report_url: Optional[str] = None
    report_date: Optional[datetime] = None
    outcomes: List[str] = Field(default_factory=list)
    publications: List[str] = Field(default_factory=list)
    collaborations: List[Collaboration] = Field(default_factory=list)
    feedback: Optional[TravelFeedback] = None


class TravelGrantCreate(CamelModel):
    title: Title
    description: Optional[str] = None
    purpose: str = Field(..., min_length=10, max_length=500)

    event: TravelEvent
    department: Department
    travel_details: TravelDetails
    funding: TravelFunding
    budget_breakdown: BudgetBreakdown = Field(default_factory=BudgetBreakdown)

    status: TravelStatus = TravelStatus.DRAFT
    submitted_date: Optional[datetime] = None
    post_travel: Optional[PostTravel] = None

    keywords: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    is_public: bool = True


class TravelReview(CamelModel):
    status: TravelStatus
    review_comments: Optional[Comments] = None


class PostTravelRequest(CamelModel):
    outcomes: List[str] = Field(default_factory=list)
    publications: List[str] = Field(default_factory=list)
    collaborations: List[Collaboration] = Field(default_factory=list)
    feedback: Optional[TravelFeedback] = None
