# app/services/publication_service.py
from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import extract
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.models.publication import Publication
from app.schemas.publications import PublicationCreate
from app.services import workflow
from app.services.records import RecordService


class PublicationService(RecordService):
    model = Publication
    create_schema = PublicationCreate
    flow = workflow.PUBLICATION_FLOW
    owner_field = "submitted_by"
    noun = "publication"
    sortable = (
        "publication_date",
        "created_at",
        "updated_at",
        "title",
        "status",
        "citation_count",
        "impact_factor",
    )

    def search_columns(self):
        return (Publication.title, Publication.abstract, Publication.keywords)

    def filter_clauses(self, filters: Dict[str, Any]) -> List:
        clauses = []
        if filters.get("status"):
            clauses.append(Publication.status == filters["status"])
        if filters.get("publication_type"):
            clauses.append(Publication.publication_type == filters["publication_type"])
        if filters.get("department"):
            clauses.append(Publication.department == filters["department"])
        if filters.get("submitted_by"):
            clauses.append(Publication.submitted_by == filters["submitted_by"])
        if filters.get("year"):
            year = str(filters["year"])
            if not year.isdigit():
                raise ValidationError.single("year", "Year must be a number")
            clauses.append(extract("year", Publication.publication_date) == int(year))
        return clauses

    def default_order(self):
        return (Publication.publication_date.desc(),)

    def stats(self, db: Session) -> Dict[str, Any]:
        return {
            "total": self.count(db),
            "published": self.count_status(db, "Published"),
            "pending": self.count_status(db, "Under Review"),
            "draft": self.count_status(db, "Draft"),
            "byType": self.count_by(db, Publication.publication_type),
            "recent": self.count_recent(db),
        }
