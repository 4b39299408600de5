# app/services/funding_service.py
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.models.funded_project import FundedProject
from app.models.travel_grant import TravelGrant
from app.models.user import User

UNKNOWN = "Unknown"
RESEARCH = "Research Grant"
TRAVEL = "Travel Grant"

# substring of the lower-cased agency name -> (type, country); first match wins
SOURCE_CLASSES: Tuple[Tuple[Tuple[str, ...], str, str], ...] = (
    (("nsf", "national science foundation"), "International", "USA"),
    (("eu", "european"), "International", "Europe"),
    (("usaid",), "International", "USA"),
    (("world bank",), "International", "Global"),
    (("gates",), "Private", "Global"),
    (("google",), "Corporate", "Global"),
)
DEFAULT_SOURCE_CLASS = ("Government", "Pakistan")


@dataclass(frozen=True)
class FundingLine:
    """One funded record flattened to what the rollups need."""

    kind: str
    amount: float
    agency: Optional[str]
    department: str
    status: str
    year: int


def classify_source(name: str) -> Tuple[str, str]:
    lowered = name.lower()
    for needles, source_type, country in SOURCE_CLASSES:
        if any(n in lowered for n in needles):
            return source_type, country
    return DEFAULT_SOURCE_CLASS


def yearly_growth(by_year: List[Tuple[int, float]]) -> int:
    """Percent change between the last two years of an ascending series."""
    if len(by_year) < 2:
        return 0
    prev, last = by_year[-2][1], by_year[-1][1]
    if prev == 0:
        return 100
    return round((last - prev) / prev * 100)


# ─────────────────────────────────────────────
# LOADING
# ─────────────────────────────────────────────


def _owner_departments(db: Session, ids: Iterable[str]) -> Dict[str, Optional[str]]:
    ids = {i for i in ids if i}
    if not ids:
        return {}
    rows = db.execute(select(User.id, User.department).where(User.id.in_(ids))).all()
    return {uid: dept for uid, dept in rows}


def load_lines(db: Session) -> List[FundingLine]:
    projects = db.execute(select(FundedProject)).scalars().all()
    grants = db.execute(select(TravelGrant)).scalars().all()
    depts = _owner_departments(
        db,
        [p.principal_investigator for p in projects] + [g.applicant for g in grants],
    )

    lines: List[FundingLine] = []
    for p in projects:
        started = p.start_date or p.created_at
        lines.append(
            FundingLine(
                kind=RESEARCH,
                amount=p.total_budget or 0,
                agency=p.agency_name,
                department=p.department or depts.get(p.principal_investigator) or UNKNOWN,
                status=p.status or UNKNOWN,
                year=started.year,
            )
        )
    for g in grants:
        lines.append(
            FundingLine(
                kind=TRAVEL,
                amount=g.funding_amount,
                agency=g.agency_name,
                department=g.department or depts.get(g.applicant) or UNKNOWN,
                status=g.status or UNKNOWN,
                year=g.created_at.year,
            )
        )
    return lines


# ─────────────────────────────────────────────
# ROLLUPS
# ─────────────────────────────────────────────


def _summarize(lines: List[FundingLine]) -> Dict[str, Any]:
    by_agency: Dict[str, float] = defaultdict(float)
    by_department: Dict[str, float] = defaultdict(float)
    by_status: Dict[str, float] = defaultdict(float)
    by_year: Dict[int, float] = defaultdict(float)
    for line in lines:
        by_agency[line.agency or UNKNOWN] += line.amount
        by_department[line.department] += line.amount
        by_status[line.status] += line.amount
        by_year[line.year] += line.amount

    amounts = [line.amount for line in lines]
    total = sum(amounts)
    return {
        "totalAmount": total,
        "count": len(lines),
        "averageAmount": total / len(lines) if lines else 0,
        "minAmount": min(amounts) if amounts else 0,
        "maxAmount": max(amounts) if amounts else 0,
        "byAgency": dict(by_agency),
        "byDepartment": dict(by_department),
        "byStatus": dict(by_status),
        "byYear": {str(y): v for y, v in sorted(by_year.items())},
    }


def _ranked(per_type: Iterable[Dict[str, float]]) -> List[Tuple[str, float]]:
    merged: Dict[str, float] = defaultdict(float)
    for part in per_type:
        for key, amount in part.items():
            merged[key] += amount
    return sorted(merged.items(), key=lambda kv: kv[1], reverse=True)


def stats(db: Session) -> Dict[str, Any]:
    lines = load_lines(db)
    projects = _summarize([l for l in lines if l.kind == RESEARCH])
    travel = _summarize([l for l in lines if l.kind == TRAVEL])

    agencies = _ranked([projects["byAgency"], travel["byAgency"]])[: get_settings().report_top_agencies]
    departments = _ranked([projects["byDepartment"], travel["byDepartment"]])

    years: Dict[int, float] = defaultdict(float)
    for part in (projects["byYear"], travel["byYear"]):
        for year, amount in part.items():
            years[int(year)] += amount
    by_year = sorted(years.items())

    total = projects["totalAmount"] + travel["totalAmount"]
    # agencies named by at least one record; "Unknown" is not a source
    sources = {l.agency for l in lines if l.agency}

    return {
        "overview": {
            "totalFunding": total,
            "totalFundingSources": len(sources),
            "averageFunding": total / len(lines) if lines else 0,
            "projectFunding": projects["totalAmount"],
            "travelFunding": travel["totalAmount"],
            "projectCount": projects["count"],
            "travelGrantCount": travel["count"],
        },
        "projects": projects,
        "travelGrants": travel,
        "combined": {
            "byAgency": dict(agencies),
            "byDepartment": dict(departments),
            "byYear": {str(y): v for y, v in by_year},
            "topAgencies": [{"name": n, "amount": a} for n, a in agencies[:5]],
            "topDepartments": [{"name": n, "amount": a} for n, a in departments[:5]],
        },
        "trends": {
            "yearlyGrowth": yearly_growth(by_year),
            "agencyDistribution": [{"name": n, "amount": a} for n, a in agencies],
            "departmentDistribution": [{"name": n, "amount": a} for n, a in departments],
        },
    }


def _slice(lines: List[FundingLine]) -> Dict[str, Any]:
    total = sum(l.amount for l in lines)
    project_count = sum(1 for l in lines if l.kind == RESEARCH)
    travel_count = len(lines) - project_count
    return {
        "totalFunding": total,
        "projectCount": project_count,
        "travelCount": travel_count,
        "totalSources": len(lines),
        "averageFunding": total / len(lines) if lines else 0,
    }


def by_department(db: Session, department: str) -> Dict[str, Any]:
    lines = [l for l in load_lines(db) if l.department == department]
    return {"department": department, **_slice(lines)}


def by_agency(db: Session, agency: str) -> Dict[str, Any]:
    lines = [l for l in load_lines(db) if l.agency == agency]
    return {"agency": agency, **_slice(lines)}


def _by_named_agency(lines: List[FundingLine]) -> Dict[str, List[FundingLine]]:
    # insertion order: projects first, then travel grants
    grouped: Dict[str, List[FundingLine]] = {}
    for line in lines:
        if line.agency:
            grouped.setdefault(line.agency, []).append(line)
    return grouped


def opportunities(db: Session) -> Dict[str, Any]:
    items = []
    for index, (agency, group) in enumerate(_by_named_agency(load_lines(db)).items(), start=1):
        kind = group[0].kind
        total = sum(l.amount for l in group)
        items.append(
            {
                "id": index,
                "title": f"{agency} {kind}",
                "agency": agency,
                "amount": round(total / len(group)),
                "category": "Research" if kind == RESEARCH else "Travel",
                "type": kind,
                "status": "Open",
                "maxAmount": max(l.amount for l in group),
                "totalAwarded": total,
                "totalProjects": len(group),
            }
        )
    return {
        "opportunities": items,
        "totalOpportunities": len(items),
        "totalFunding": sum(o["amount"] for o in items),
        "categories": list(dict.fromkeys(o["category"] for o in items)),
        "agencies": [o["agency"] for o in items],
    }


def sources(db: Session) -> Dict[str, Any]:
    items = []
    for agency, group in _by_named_agency(load_lines(db)).items():
        source_type, country = classify_source(agency)
        total = sum(l.amount for l in group)
        items.append(
            {
                "name": agency,
                "type": source_type,
                "country": country,
                "averageAmount": round(total / len(group)),
                "totalAwarded": total,
                "totalProjects": sum(1 for l in group if l.kind == RESEARCH),
                "totalTravelGrants": sum(1 for l in group if l.kind == TRAVEL),
            }
        )

    by_type: Dict[str, int] = defaultdict(int)
    by_country: Dict[str, int] = defaultdict(int)
    for s in items:
        by_type[s["type"]] += 1
        by_country[s["country"]] += 1
    return {
        "sources": items,
        "totalSources": len(items),
        "byType": dict(by_type),
        "byCountry": dict(by_country),
    }
