#app/schemas/common.py
from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

EMAIL_RE = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")
ORCID_RE = r"^\d{4}-\d{4}-\d{4}-\d{3}[\dX]$"


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not EMAIL_RE.match(value):
        raise ValueError("Please enter a valid email")
    return value


class CamelModel(BaseModel):
    """
    Wire models accept and emit camelCase keys (``firstName``) while the
    attribute names stay snake_case and line up with the ORM columns.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


# --- Primitives ---
Email = Annotated[str, AfterValidator(_normalize_email)]
Title = Annotated[str, StringConstraints(min_length=5, max_length=200)]
Orcid = Annotated[str, StringConstraints(pattern=ORCID_RE)]
UserRef = Annotated[str, StringConstraints(min_length=1, max_length=36)]
Money = Annotated[float, Field(ge=0)]
Marks = Annotated[float, Field(ge=0, le=100)]
TimeOfDay = Annotated[str, StringConstraints(min_length=1, max_length=20)]
Comments = Annotated[str, StringConstraints(max_length=1000)]


# --- Shared nested objects ---
class ContactPerson(CamelModel):
    name: Optional[str] = None
    email: Optional[Email] = None
    phone: Optional[str] = None


class Venue(CamelModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class Milestone(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    status: Optional[str] = None


class Deliverable(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[str] = None
    url: Optional[str] = None


# ─────────── WORKFLOW BODIES ───────────


class DecisionRequest(CamelModel):
    """Body of ``approve`` / ``reject``."""

    comments: Optional[Comments] = None
