# app/services/funded_project_service.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.models.enums import ProjectStatus
from app.models.funded_project import FundedProject
from app.models.mixins import utcnow
from app.policies.rbac import Principal
from app.schemas.funded_projects import FundedProjectCreate
from app.services import workflow
from app.services.query import json_text, mentions_id
from app.services.records import RecordService


class FundedProjectService(RecordService):
    model = FundedProject
    create_schema = FundedProjectCreate
    flow = workflow.PROJECT_FLOW
    owner_field = "principal_investigator"
    noun = "project"
    sortable = (
        "start_date",
        "end_date",
        "created_at",
        "updated_at",
        "title",
        "status",
        "total_budget",
    )

    def search_columns(self):
        return (FundedProject.title, FundedProject.description, FundedProject.abstract)

    def filter_clauses(self, filters: Dict[str, Any]) -> List:
        clauses = []
        if filters.get("status"):
            clauses.append(FundedProject.status == filters["status"])
        if filters.get("project_type"):
            clauses.append(FundedProject.project_type == filters["project_type"])
        if filters.get("department"):
            clauses.append(FundedProject.department == filters["department"])
        if filters.get("funding_agency"):
            clauses.append(json_text(FundedProject.funding_agency, "name") == filters["funding_agency"])
        if filters.get("pi_id"):
            pi = str(filters["pi_id"])
            clauses.append(
                or_(
                    FundedProject.principal_investigator == pi,
                    mentions_id(FundedProject.co_principal_investigators, pi),
                )
            )
        return clauses

    def default_order(self):
        return (FundedProject.start_date.desc(),)

    def after_review(self, record: FundedProject, status: Enum, principal: Principal) -> None:
        if status == ProjectStatus.APPROVED:
            record.approved_date = utcnow()

    def stats(self, db: Session) -> Dict[str, Any]:
        total_funding = db.execute(
            select(func.coalesce(func.sum(FundedProject.total_budget), 0))
        ).scalar_one()
        return {
            "total": self.count(db),
            "active": self.count_status(db, "Active"),
            "completed": self.count_status(db, "Completed"),
            "pending": self.count_status(db, "Under Review"),
            "byType": self.count_by(db, FundedProject.project_type),
            "totalFunding": total_funding,
            "recent": self.count_recent(db),
        }
