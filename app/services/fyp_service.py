# app/services/fyp_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.enums import FypStatus
from app.models.final_year_project import FinalYearProject
from app.policies.ownership_policy import require_edit
from app.policies.rbac import Principal
from app.schemas.fyp import FypCreate, GradeRequest
from app.services import workflow
from app.services.query import json_text
from app.services.records import RecordService, to_column

logger = logging.getLogger(__name__)


class FypService(RecordService):
    model = FinalYearProject
    create_schema = FypCreate
    flow = workflow.FYP_FLOW
    owner_field = "supervisor"
    noun = "FYP project"
    sortable = ("start_date", "end_date", "created_at", "updated_at", "title", "status")

    def search_columns(self):
        return (
            FinalYearProject.title,
            FinalYearProject.description,
            json_text(FinalYearProject.student, "name"),
            json_text(FinalYearProject.student, "rollNumber"),
        )

    def filter_clauses(self, filters: Dict[str, Any]) -> List:
        clauses = []
        if filters.get("status"):
            clauses.append(FinalYearProject.status == filters["status"])
        if filters.get("project_type"):
            clauses.append(FinalYearProject.project_type == filters["project_type"])
        if filters.get("degree"):
            clauses.append(json_text(FinalYearProject.student, "degree") == filters["degree"])
        if filters.get("batch"):
            clauses.append(json_text(FinalYearProject.student, "batch") == filters["batch"])
        if filters.get("department"):
            clauses.append(json_text(FinalYearProject.student, "department") == filters["department"])
        if filters.get("supervisor_id"):
            sid = str(filters["supervisor_id"])
            clauses.append(
                or_(FinalYearProject.supervisor == sid, FinalYearProject.co_supervisor == sid)
            )
        return clauses

    def default_order(self):
        return (FinalYearProject.start_date.desc(),)

    def grade(
        self, db: Session, *, record_id: str, principal: Principal, body: GradeRequest
    ) -> FinalYearProject:
        """
        Record the evaluation; total marks are the sum of the three components
        (missing ones count as 0) and the project moves to Graded.
        """
        record = self.get(db, record_id)
        require_edit(principal, record, self.noun)

        total = (body.supervisor_marks or 0) + (body.external_marks or 0) + (body.defense_marks or 0)
        evaluation = dict(record.evaluation or {})
        evaluation.update(
            {
                "supervisorMarks": body.supervisor_marks,
                "externalMarks": body.external_marks,
                "defenseMarks": body.defense_marks,
                "totalMarks": total,
                "grade": to_column(body.grade),
                "comments": body.comments,
            }
        )
        record.evaluation = evaluation
        record.status = FypStatus.GRADED.value
        db.commit()
        db.refresh(record)

        logger.info(
            "FYP project graded",
            extra={"record_id": record.id, "actor_id": principal.user_id, "grade": evaluation["grade"]},
        )
        return record

    def stats(self, db: Session) -> Dict[str, Any]:
        return {
            "total": self.count(db),
            "completed": self.count_status(db, "Completed"),
            "ongoing": self.count_status(db, "In Progress"),
            "graded": self.count_status(db, "Graded"),
            "byType": self.count_by(db, FinalYearProject.project_type),
            "byBatch": self.count_by(db, json_text(FinalYearProject.student, "batch")),
            "recent": self.count_recent(db),
        }
