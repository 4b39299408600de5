# app/api/v1/publications.py
from __future__ import annotations

from app.api.v1.records import record_router
from app.schemas.publications import PublicationReview
from app.services.publication_service import PublicationService

router = record_router(
    prefix="/publications",
    service=PublicationService(),
    singular="publication",
    plural="publications",
    filters={
        "status": "status",
        "publicationType": "publication_type",
        "department": "department",
        "submittedBy": "submitted_by",
        "year": "year",
    },
    review_schema=PublicationReview,
)
