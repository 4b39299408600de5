# app/api/v1/thesis.py
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.v1.records import record_router
from app.core.auth_deps import get_current_principal
from app.core.errors import ok
from app.db.session import get_db
from app.policies.rbac import Principal
from app.schemas.thesis import DefenseRequest
from app.services.presenters import present
from app.services.thesis_service import ThesisService

service = ThesisService()

router = record_router(
    prefix="/thesis",
    service=service,
    singular="thesisSupervision",
    plural="thesisSupervisions",
    filters={
        "status": "status",
        "degree": "degree",
        "batch": "batch",
        "department": "department",
        "supervisorId": "supervisor_id",
    },
)


@router.put("/{record_id}/defense")
def record_defense(
    record_id: str,
    body: DefenseRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    record = service.record_defense(db, record_id=record_id, principal=principal, body=body)
    return ok({"thesisSupervision": present(db, record)}, message="Defense details updated successfully")
