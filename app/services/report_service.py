# app/services/report_service.py
from __future__ import annotations

import calendar
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ServerError, ValidationError
from app.core.streaming import sectioned_csv_stream
from app.models.event import Event
from app.models.final_year_project import FinalYearProject
from app.models.funded_project import FundedProject
from app.models.mixins import as_utc, utcnow
from app.models.publication import Publication
from app.models.thesis_supervision import ThesisSupervision
from app.models.travel_grant import TravelGrant
from app.models.user import User
from app.schemas.reports import DateRange, ExportRequest, ReportModule, ReportRequest
from app.services import user_service
from app.services.event_service import EventService
from app.services.funded_project_service import FundedProjectService
from app.services.fyp_service import FypService
from app.services.presenters import present_many
from app.services.publication_service import PublicationService
from app.services.thesis_service import ThesisService
from app.services.travel_service import TravelService

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv")


@dataclass(frozen=True)
class ReportSource:
    model: Any
    date_field: Optional[str]


# report order; users are never date filtered
SOURCES: Dict[str, ReportSource] = {
    "publications": ReportSource(Publication, "publication_date"),
    "projects": ReportSource(FundedProject, "start_date"),
    "fyp": ReportSource(FinalYearProject, "start_date"),
    "thesis": ReportSource(ThesisSupervision, "start_date"),
    "events": ReportSource(Event, "start_date"),
    "travel": ReportSource(TravelGrant, "submitted_date"),
    "users": ReportSource(User, None),
}


# ─────────────────────────────────────────────
# DATE WINDOWS
# ─────────────────────────────────────────────


def months_ago(now: datetime, months: int) -> datetime:
    """Same day-of-month ``months`` calendar months back, clamped to month end."""
    total = now.year * 12 + (now.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def date_window(
    date_range: DateRange,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Tuple[Optional[datetime], Optional[datetime], bool]:
    """
    ``(lower, upper, upper_inclusive)`` for a named range. ``(None, None, _)``
    means no date filter at all.
    """
    now = now or utcnow()
    if date_range == DateRange.this_year:
        return datetime(now.year, 1, 1, tzinfo=timezone.utc), datetime(now.year + 1, 1, 1, tzinfo=timezone.utc), False
    if date_range == DateRange.last_year:
        return datetime(now.year - 1, 1, 1, tzinfo=timezone.utc), datetime(now.year, 1, 1, tzinfo=timezone.utc), False
    if date_range == DateRange.last_6_months:
        return months_ago(now, 6), None, False
    if date_range == DateRange.last_3_months:
        return months_ago(now, 3), None, False
    if date_range == DateRange.custom and start and end:
        return as_utc(start), as_utc(end), True
    return None, None, False


# ─────────────────────────────────────────────
# SELECTION
# ─────────────────────────────────────────────


def _select(db: Session, source: ReportSource, window) -> List[Any]:
    lower, upper, inclusive = window
    stmt = select(source.model)
    if source.date_field:
        col = getattr(source.model, source.date_field)
        if lower is not None:
            stmt = stmt.where(col >= lower)
        if upper is not None:
            stmt = stmt.where(col <= upper if inclusive else col < upper)
        stmt = stmt.order_by(col.desc())
    else:
        stmt = stmt.order_by(source.model.created_at.desc())
    return list(db.execute(stmt).scalars().all())


def _modules(module: ReportModule) -> List[str]:
    return list(SOURCES) if module == ReportModule.all else [module.value]


def collect(db: Session, req: ReportRequest) -> Dict[str, List[Dict[str, Any]]]:
    window = date_window(req.date_range, req.start_date, req.end_date)
    return {
        name: present_many(db, _select(db, SOURCES[name], window), brief=True)
        for name in _modules(req.module)
    }


def generate(db: Session, req: ReportRequest) -> Dict[str, Any]:
    data = collect(db, req)
    logger.info(
        "report generated",
        extra={"report_module": req.module.value, "date_range": req.date_range.value},
    )
    return {
        "reportData": data,
        "summary": {
            "totalRecords": sum(len(rows) for rows in data.values()),
            "modules": list(data),
        },
        "filters": req.model_dump(mode="json", by_alias=True),
        "generatedAt": utcnow().isoformat(),
    }


def export(db: Session, req: ExportRequest) -> Tuple[str, str, Iterator[bytes]]:
    """Returns ``(filename, media_type, body)`` for a download response."""
    fmt = (req.format or "").lower()
    if fmt not in EXPORT_FORMATS:
        raise ValidationError.single("format", "Invalid format. Supported formats: json, csv")

    filename = f"{req.module.value}-report-{utcnow().date().isoformat()}.{fmt}"
    if fmt == "csv":
        body = sectioned_csv_stream(collect(db, req))
        media_type = "text/csv"
    else:
        bundle = generate(db, req)
        body = iter([json.dumps(bundle, default=str, indent=2).encode("utf-8")])
        media_type = "application/json"

    logger.info("report exported", extra={"report_module": req.module.value, "export_format": fmt})
    return filename, media_type, body


# ─────────────────────────────────────────────
# DASHBOARD
# ─────────────────────────────────────────────

STAT_SOURCES: Dict[str, Callable[[Session], Dict[str, Any]]] = {
    "publications": PublicationService().stats,
    "projects": FundedProjectService().stats,
    "fyp": FypService().stats,
    "thesis": ThesisService().stats,
    "events": EventService().stats,
    "travel": TravelService().stats,
    "users": user_service.stats,
}


def comprehensive_stats(db: Session) -> Dict[str, Any]:
    try:
        parts = {name: fn(db) for name, fn in STAT_SOURCES.items()}
    except SQLAlchemyError as exc:
        logger.exception("comprehensive stats failed")
        raise ServerError("Server error while fetching comprehensive statistics") from exc

    parts["summary"] = {
        "totalPublications": parts["publications"]["total"],
        "totalProjects": parts["projects"]["total"],
        "totalFYP": parts["fyp"]["total"],
        "totalTheses": parts["thesis"]["total"],
        "totalUsers": parts["users"]["total"],
        "totalEvents": parts["events"]["total"],
        "totalTravelGrants": parts["travel"]["total"],
        "totalFunding": parts["projects"]["totalFunding"] + parts["travel"]["totalFunding"],
    }
    return parts
