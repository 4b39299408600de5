#app/schemas/contacts.py
from __future__ import annotations

import re
from typing import Annotated, Any, Dict, List, Optional

from pydantic import AfterValidator, Field, StringConstraints

from app.models.enums import ContactPriority, ContactSource, ContactStatus, ContactType
from app.schemas.common import CamelModel, Email

PHONE_RE = re.compile(r"^[\+]?[0-9][\d\s\-\(\)\.]{7,20}$")


def clean_phone(value: str) -> str:
    if not PHONE_RE.match(value):
        raise ValueError("Please enter a valid phone number")
    digits = re.sub(r"[^\d\+]", "", value)
    if len(digits) > 10 and not digits.startswith("+"):
        digits = "+" + digits
    return digits


Phone = Annotated[str, AfterValidator(clean_phone)]
Tag = Annotated[str, StringConstraints(max_length=30)]
Short = Annotated[str, StringConstraints(max_length=100)]


class ContactCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: Email
    phone: Optional[Phone] = None

    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)

    contact_type: ContactType = ContactType.GENERAL
    priority: ContactPriority = ContactPriority.MEDIUM

    organization: Optional[Short] = None
    position: Optional[Short] = None
    department: Optional[Short] = None

    source: ContactSource = ContactSource.WEBSITE
    tags: List[Tag] = Field(default_factory=list)


class ContactUpdate(ContactCreate):
    """Admin edit: the public fields plus triage state."""

    status: ContactStatus = ContactStatus.NEW
    assigned_to: Optional[str] = None


class RespondRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=2000)
    status: Optional[ContactStatus] = None


class BulkUpdateRequest(CamelModel):
    contact_ids: List[str] = Field(..., min_length=1)
    updates: Dict[str, Any]


class BulkUpdates(CamelModel):
    """Fields a bulk update may touch; every one optional."""

    status: Optional[ContactStatus] = None
    priority: Optional[ContactPriority] = None
    contact_type: Optional[ContactType] = None
    source: Optional[ContactSource] = None
    assigned_to: Optional[str] = None
    tags: Optional[List[Tag]] = None
