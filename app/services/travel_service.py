# app/services/travel_service.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.enums import TravelStatus
from app.models.mixins import utcnow
from app.models.travel_grant import TravelGrant
from app.policies.ownership_policy import require_edit
from app.policies.rbac import Principal
from app.schemas.travel import PostTravelRequest, TravelGrantCreate
from app.services import workflow
from app.services.query import json_text
from app.services.records import RecordService, to_column

logger = logging.getLogger(__name__)


class TravelService(RecordService):
    model = TravelGrant
    create_schema = TravelGrantCreate
    flow = workflow.TRAVEL_FLOW
    owner_field = "applicant"
    noun = "travel grant"
    sortable = ("submitted_date", "created_at", "updated_at", "title", "status")

    def search_columns(self):
        return (TravelGrant.title, TravelGrant.purpose, json_text(TravelGrant.event, "name"))

    def filter_clauses(self, filters: Dict[str, Any]) -> List:
        clauses = []
        if filters.get("status"):
            clauses.append(TravelGrant.status == filters["status"])
        if filters.get("event_type"):
            clauses.append(json_text(TravelGrant.event, "type") == filters["event_type"])
        if filters.get("department"):
            clauses.append(TravelGrant.department == filters["department"])
        if filters.get("applicant_id"):
            clauses.append(TravelGrant.applicant == str(filters["applicant_id"]))
        return clauses

    def default_order(self):
        return (json_text(TravelGrant.event, "startDate").desc(),)

    def before_save(self, record: TravelGrant) -> None:
        if record.status == TravelStatus.SUBMITTED.value and record.submitted_date is None:
            record.submitted_date = utcnow()

    def after_review(self, record: TravelGrant, status: Enum, principal: Principal) -> None:
        if status == TravelStatus.APPROVED:
            record.approved_by = principal.user_id
            record.approved_date = utcnow()
        else:
            record.approved_by = None
            record.approved_date = None

    def submit_post_travel(
        self, db: Session, *, record_id: str, principal: Principal, body: PostTravelRequest
    ) -> TravelGrant:
        """Attach the post-travel report and close the grant as Completed."""
        record = self.get(db, record_id)
        require_edit(principal, record, self.noun)

        post = dict(record.post_travel or {})
        post.update(
            {
                "completionDate": utcnow().isoformat(),
                "reportSubmitted": True,
                "outcomes": body.outcomes,
                "publications": body.publications,
                "collaborations": to_column(body.collaborations),
                "feedback": to_column(body.feedback) if body.feedback else None,
            }
        )
        record.post_travel = post
        record.status = TravelStatus.COMPLETED.value
        db.commit()
        db.refresh(record)

        logger.info(
            "post-travel report submitted",
            extra={"record_id": record.id, "actor_id": principal.user_id},
        )
        return record

    def stats(self, db: Session) -> Dict[str, Any]:
        fundings = db.execute(select(TravelGrant.funding)).scalars().all()
        return {
            "total": self.count(db),
            "approved": self.count_status(db, "Approved"),
            "completed": self.count_status(db, "Completed"),
            "pending": self.count_status(db, "Under Review"),
            "byEventType": self.count_by(db, json_text(TravelGrant.event, "type")),
            "totalFunding": sum((f or {}).get("totalAmount") or 0 for f in fundings),
            "recent": self.count_recent(db),
        }
