# app/services/thesis_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.enums import DefenseResult, ThesisStatus
from app.models.thesis_supervision import ThesisSupervision
from app.policies.ownership_policy import require_edit
from app.policies.rbac import Principal
from app.schemas.thesis import DefenseRequest, ThesisCreate
from app.services import workflow
from app.services.query import json_text, mentions_id
from app.services.records import RecordService, to_column

logger = logging.getLogger(__name__)

ONGOING_STATUSES = ("In Progress", "Data Collection", "Analysis", "Writing")


class ThesisService(RecordService):
    model = ThesisSupervision
    create_schema = ThesisCreate
    flow = workflow.THESIS_FLOW
    owner_field = "supervisor"
    noun = "thesis supervision"
    sortable = (
        "start_date",
        "expected_completion_date",
        "created_at",
        "updated_at",
        "title",
        "status",
    )

    def search_columns(self):
        return (
            ThesisSupervision.title,
            ThesisSupervision.abstract,
            json_text(ThesisSupervision.student, "name"),
            json_text(ThesisSupervision.student, "rollNumber"),
        )

    def filter_clauses(self, filters: Dict[str, Any]) -> List:
        clauses = []
        if filters.get("status"):
            clauses.append(ThesisSupervision.status == filters["status"])
        if filters.get("degree"):
            clauses.append(ThesisSupervision.degree == filters["degree"])
        if filters.get("batch"):
            clauses.append(json_text(ThesisSupervision.student, "batch") == filters["batch"])
        if filters.get("department"):
            clauses.append(json_text(ThesisSupervision.student, "department") == filters["department"])
        if filters.get("supervisor_id"):
            sid = str(filters["supervisor_id"])
            clauses.append(
                or_(
                    ThesisSupervision.supervisor == sid,
                    ThesisSupervision.co_supervisor == sid,
                    mentions_id(ThesisSupervision.supervisory_committee, sid),
                )
            )
        return clauses

    def default_order(self):
        return (ThesisSupervision.start_date.desc(),)

    def record_defense(
        self, db: Session, *, record_id: str, principal: Principal, body: DefenseRequest
    ) -> ThesisSupervision:
        """
        Replace the defense sub-object. A ``Pass`` result completes the thesis
        whatever status the caller sent; any other result leaves status alone.
        """
        record = self.get(db, record_id)
        require_edit(principal, record, self.noun)

        record.defense = to_column(body)
        record.defense_date = to_column(body.date)
        if body.result == DefenseResult.PASS:
            record.status = ThesisStatus.COMPLETED.value
        db.commit()
        db.refresh(record)

        logger.info(
            "thesis defense recorded",
            extra={
                "record_id": record.id,
                "actor_id": principal.user_id,
                "result": body.result.value if body.result else None,
                "status": record.status,
            },
        )
        return record

    def stats(self, db: Session) -> Dict[str, Any]:
        return {
            "total": self.count(db),
            "completed": self.count_status(db, "Completed"),
            "ongoing": self.count_status(db, *ONGOING_STATUSES),
            "defended": self.count_status(db, "Defended"),
            "byType": self.count_by(db, ThesisSupervision.degree),
            "byBatch": self.count_by(db, json_text(ThesisSupervision.student, "batch")),
            "recent": self.count_recent(db),
        }
