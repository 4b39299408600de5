#app/schemas/reports.py
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from app.schemas.common import CamelModel


class ReportModule(str, Enum):
    publications = "publications"
    projects = "projects"
    fyp = "fyp"
    thesis = "thesis"
    events = "events"
    travel = "travel"
    users = "users"
    all = "all"


class DateRange(str, Enum):
    this_year = "thisYear"
    last_year = "lastYear"
    last_6_months = "last6Months"
    last_3_months = "last3Months"
    custom = "custom"
    all = "all"


class ReportRequest(CamelModel):
    module: ReportModule = ReportModule.all
    date_range: DateRange = DateRange.all
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class ExportRequest(ReportRequest):
    format: str = "json"
