# app/api/v1/fyp.py
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.v1.records import record_router
from app.core.auth_deps import get_current_principal
from app.core.errors import ok
from app.db.session import get_db
from app.policies.rbac import Principal
from app.schemas.fyp import GradeRequest
from app.services.fyp_service import FypService
from app.services.presenters import present

service = FypService()

router = record_router(
    prefix="/fyp",
    service=service,
    singular="fypProject",
    plural="fypProjects",
    filters={
        "status": "status",
        "projectType": "project_type",
        "degree": "degree",
        "batch": "batch",
        "department": "department",
        "supervisorId": "supervisor_id",
    },
)


@router.put("/{record_id}/grade")
def grade_project(
    record_id: str,
    body: GradeRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    record = service.grade(db, record_id=record_id, principal=principal, body=body)
    return ok({"fypProject": present(db, record)}, message="FYP project graded successfully")
