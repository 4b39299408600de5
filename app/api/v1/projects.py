# app/api/v1/projects.py
from __future__ import annotations

from app.api.v1.records import record_router
from app.schemas.funded_projects import FundedProjectReview
from app.services.funded_project_service import FundedProjectService

router = record_router(
    prefix="/projects",
    service=FundedProjectService(),
    singular="project",
    plural="projects",
    filters={
        "status": "status",
        "projectType": "project_type",
        "department": "department",
        "fundingAgency": "funding_agency",
        "piId": "pi_id",
    },
    review_schema=FundedProjectReview,
)
