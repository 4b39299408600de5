# app/services/event_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.models.enums import AttendanceStatus
from app.models.event import Event
from app.models.mixins import as_utc, new_id, utcnow
from app.models.user import User
from app.policies.ownership_policy import require_edit
from app.policies.rbac import Principal
from app.schemas.events import AttendanceRequest, EventCreate, RegisterRequest
from app.services import workflow
from app.services.query import mentions_id
from app.services.records import RecordService

logger = logging.getLogger(__name__)


class EventService(RecordService):
    model = Event
    create_schema = EventCreate
    flow = workflow.EVENT_FLOW
    owner_field = "organizer"
    noun = "event"
    sortable = ("start_date", "end_date", "created_at", "updated_at", "title", "status")

    def search_columns(self):
        return (Event.title, Event.description, Event.abstract)

    def filter_clauses(self, filters: Dict[str, Any]) -> List:
        clauses = []
        if filters.get("status"):
            clauses.append(Event.status == filters["status"])
        if filters.get("event_type"):
            clauses.append(Event.event_type == filters["event_type"])
        if filters.get("event_format"):
            clauses.append(Event.event_format == filters["event_format"])
        if filters.get("department"):
            clauses.append(Event.department == filters["department"])
        if filters.get("organizer_id"):
            oid = str(filters["organizer_id"])
            clauses.append(or_(Event.organizer == oid, mentions_id(Event.co_organizers, oid)))
        return clauses

    def default_order(self):
        return (Event.start_date.desc(),)

    def before_save(self, record: Event) -> None:
        # participants are addressed by id from the attendance endpoint
        participants = []
        for p in record.participants or []:
            p = dict(p)
            if not p.get("id"):
                p["id"] = new_id()
            participants.append(p)
        record.participants = participants

    # ─────────── participants ───────────

    def register(
        self, db: Session, *, record_id: str, user: User, body: RegisterRequest
    ) -> Dict[str, Any]:
        event = self.get(db, record_id)
        registration = event.registration or {}

        if not registration.get("isRequired"):
            raise ValidationError("Registration is not required for this event")

        deadline = as_utc(registration.get("registrationDeadline"))
        if deadline and utcnow() > deadline:
            raise ValidationError("Registration deadline has passed")

        email = body.email or user.email
        participants = list(event.participants or [])
        if any(p.get("email") == email for p in participants):
            raise ValidationError("You are already registered for this event")

        limit = registration.get("maxParticipants")
        if limit and len(participants) >= limit:
            raise ValidationError("Maximum participants reached")

        participant = {
            "id": new_id(),
            "name": body.name or user.full_name,
            "email": email,
            "affiliation": body.affiliation or user.department,
            "registrationDate": utcnow().isoformat(),
            "attendanceStatus": AttendanceStatus.REGISTERED.value,
        }
        event.participants = participants + [participant]
        db.commit()

        logger.info(
            "event registration",
            extra={"record_id": event.id, "participant_id": participant["id"], "user_id": user.id},
        )
        return participant

    def set_attendance(
        self, db: Session, *, record_id: str, principal: Principal, body: AttendanceRequest
    ) -> Dict[str, Any]:
        event = self.get(db, record_id)
        require_edit(principal, event, self.noun)

        participants = [dict(p) for p in event.participants or []]
        match = next((p for p in participants if p.get("id") == body.participant_id), None)
        if match is None:
            raise NotFound("Participant not found")

        match["attendanceStatus"] = body.attendance_status.value
        event.participants = participants
        db.commit()

        logger.info(
            "attendance updated",
            extra={
                "record_id": event.id,
                "participant_id": body.participant_id,
                "attendance": body.attendance_status.value,
            },
        )
        return match

    def stats(self, db: Session) -> Dict[str, Any]:
        participant_lists = db.execute(select(Event.participants)).scalars().all()
        return {
            "total": self.count(db),
            "completed": self.count_status(db, "Completed"),
            "upcoming": self.count_status(db, "Planned", "Scheduled"),
            "ongoing": self.count_status(db, "Ongoing"),
            "byType": self.count_by(db, Event.event_type),
            "byFormat": self.count_by(db, Event.event_format),
            "totalParticipants": sum(len(p or []) for p in participant_lists),
            "recent": self.count_recent(db),
        }
