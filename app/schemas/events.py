#app/schemas/events.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.core.types import Department
from app.models.enums import AttendanceStatus, EventCategory, EventFormat, EventStatus, EventType
from app.schemas.common import CamelModel, Email, Money, TimeOfDay, Title, UserRef
from app.schemas.fyp import StudentFunding


class CoOrganizer(CamelModel):
    faculty: Optional[UserRef] = None
    name: Optional[str] = None
    email: Optional[Email] = None
    role: Optional[str] = None


class ExternalOrganizer(CamelModel):
    name: str = Field(..., min_length=1)
    affiliation: Optional[str] = None
    email: Optional[Email] = None
    phone: Optional[str] = None
    role: Optional[str] = None


class EventVenue(CamelModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=0)


class OnlinePlatform(CamelModel):
    name: Optional[str] = None
    url: Optional[str] = None
    meeting_id: Optional[str] = None
    password: Optional[str] = None


class Registration(CamelModel):
    is_required: bool = False
    registration_deadline: Optional[datetime] = None
    max_participants: Optional[int] = Field(default=None, ge=1)
    registration_fee: Money = 0
    currency: str = "PKR"
    registration_url: Optional[str] = None


class Speaker(CamelModel):
    name: str = Field(..., min_length=1)
    affiliation: Optional[str] = None
    email: Optional[Email] = None
    designation: Optional[str] = None
    bio: Optional[str] = None
    is_keynote: bool = False
    session_title: Optional[str] = None
    session_time: Optional[str] = None


class Participant(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[Email] = None
    affiliation: Optional[str] = None
    registration_date: Optional[datetime] = None
    attendance_status: AttendanceStatus = AttendanceStatus.REGISTERED


class EventCreate(CamelModel):
    title: Title
    description: Optional[str] = None
    abstract: Optional[str] = None
    event_type: EventType
    category: Optional[EventCategory] = None

    co_organizers: List[CoOrganizer] = Field(default_factory=list)
    external_organizers: List[ExternalOrganizer] = Field(default_factory=list)

    department: Department
    event_format: EventFormat
    venue: Optional[EventVenue] = None
    online_platform: Optional[OnlinePlatform] = None

    start_date: datetime
    end_date: datetime
    start_time: TimeOfDay
    end_time: TimeOfDay
    timezone: str = "UTC"

    registration: Registration = Field(default_factory=Registration)
    speakers: List[Speaker] = Field(default_factory=list)
    participants: List[Participant] = Field(default_factory=list)

    status: EventStatus = EventStatus.PLANNED

    funding: Optional[StudentFunding] = None
    keywords: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    event_website: Optional[str] = None
    notes: Optional[str] = None
    is_public: bool = True


class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[Email] = None
    affiliation: Optional[str] = None


class AttendanceRequest(CamelModel):
    participant_id: str = Field(..., min_length=1)
    attendance_status: AttendanceStatus
