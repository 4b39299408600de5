# app/api/v1/reports.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.errors import ok
from app.db.session import get_db
from app.schemas.reports import ExportRequest, ReportRequest
from app.services import report_service

router = APIRouter(prefix="/reports")


@router.get("/stats")
def comprehensive_stats(db: Session = Depends(get_db)):
    return ok(report_service.comprehensive_stats(db))


@router.post("/generate")
def generate_report(req: ReportRequest, db: Session = Depends(get_db)):
    return ok(report_service.generate(db, req))


@router.post("/export")
def export_report(req: ExportRequest, db: Session = Depends(get_db)):
    filename, media_type, body = report_service.export(db, req)
    return StreamingResponse(
        body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
