# app/api/v1/travel.py
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.v1.records import record_router
from app.core.auth_deps import get_current_principal
from app.core.errors import ok
from app.db.session import get_db
from app.policies.rbac import Principal
from app.schemas.travel import PostTravelRequest, TravelReview
from app.services.presenters import present
from app.services.travel_service import TravelService

service = TravelService()

router = record_router(
    prefix="/travel",
    service=service,
    singular="travelGrant",
    plural="travelGrants",
    filters={
        "status": "status",
        "eventType": "event_type",
        "department": "department",
        "applicantId": "applicant_id",
    },
    review_schema=TravelReview,
)


@router.put("/{record_id}/post-travel")
def submit_post_travel(
    record_id: str,
    body: PostTravelRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    record = service.submit_post_travel(db, record_id=record_id, principal=principal, body=body)
    return ok({"travelGrant": present(db, record)}, message="Post-travel report submitted successfully")
