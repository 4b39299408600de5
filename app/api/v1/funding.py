# app/api/v1/funding.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.errors import ok
from app.db.session import get_db
from app.services import funding_service

router = APIRouter(prefix="/funding")


@router.get("/stats")
def funding_stats(db: Session = Depends(get_db)):
    return ok(funding_service.stats(db))


@router.get("/department/{department}")
def funding_by_department(department: str, db: Session = Depends(get_db)):
    return ok(funding_service.by_department(db, department))


@router.get("/agency/{agency}")
def funding_by_agency(agency: str, db: Session = Depends(get_db)):
    return ok(funding_service.by_agency(db, agency))


@router.get("/opportunities")
def funding_opportunities(db: Session = Depends(get_db)):
    return ok(funding_service.opportunities(db))


@router.get("/sources")
def funding_sources(db: Session = Depends(get_db)):
    return ok(funding_service.sources(db))
