# app/api/v1/events.py
from __future__ import annotations

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.v1.records import record_router
from app.core.auth_deps import get_current_principal, get_current_user
from app.core.errors import ok
from app.db.session import get_db
from app.models.user import User
from app.policies.rbac import Principal
from app.schemas.events import AttendanceRequest, RegisterRequest
from app.services.event_service import EventService

service = EventService()

router = record_router(
    prefix="/events",
    service=service,
    singular="event",
    plural="events",
    filters={
        "status": "status",
        "eventType": "event_type",
        "format": "event_format",
        "department": "department",
        "organizerId": "organizer_id",
    },
)


@router.post("/{record_id}/register", status_code=201)
def register_for_event(
    record_id: str,
    body: Optional[RegisterRequest] = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    participant = service.register(db, record_id=record_id, user=user, body=body or RegisterRequest())
    return ok({"participant": participant}, message="Successfully registered for event")


@router.put("/{record_id}/attendance")
def update_attendance(
    record_id: str,
    body: AttendanceRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    participant = service.set_attendance(db, record_id=record_id, principal=principal, body=body)
    return ok({"participant": participant}, message="Attendance updated successfully")
