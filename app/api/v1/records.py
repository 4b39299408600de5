# app/api/v1/records.py
from typing import Any, Dict, Optional, Type

from fastapi import APIRouter, Body, Depends, Query, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.auth_deps import get_current_principal
from app.core.errors import ok
from app.db.session import get_db
from app.policies.rbac import Principal
from app.schemas.common import DecisionRequest
from app.services.presenters import present, present_many
from app.services.query import Pagination
from app.services.records import RecordService


def list_params(page: Optional[int] = Query(None), limit: Optional[int] = Query(None)) -> Pagination:
    return Pagination.from_params(page, limit)


def record_router(
    *,
    prefix: str,
    service: RecordService,
    singular: str,
    plural: str,
    filters: Dict[str, str],
    review_schema: Optional[Type[BaseModel]] = None,
) -> APIRouter:
    """
    The routes every research record type shares.

    ``filters`` maps a query-string name to the service filter key. Callers
    add their type-specific sub-resource routes to the returned router.
    """
    router = APIRouter(prefix=prefix)

    @router.get("")
    def list_records(
        request: Request,
        pagination: Pagination = Depends(list_params),
        search: Optional[str] = Query(None),
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_order: Optional[str] = Query(None, alias="sortOrder"),
        db: Session = Depends(get_db),
    ):
        params = request.query_params
        page = service.list(
            db,
            pagination=pagination,
            search=search,
            filters={key: params.get(name) for name, key in filters.items()},
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return ok({plural: present_many(db, page.items), "pagination": page.meta()})

    @router.get("/stats")
    def record_stats(db: Session = Depends(get_db)):
        return ok(service.stats(db))

    @router.get("/{record_id}")
    def get_record(record_id: str, db: Session = Depends(get_db)):
        return ok({singular: present(db, service.get(db, record_id))})

    @router.post("", status_code=201)
    def create_record(
        payload: Dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
        principal: Principal = Depends(get_current_principal),
    ):
        record = service.create(db, principal=principal, payload=payload)
        return ok({singular: present(db, record)}, message=f"{service.label} created successfully")

    @router.put("/{record_id}")
    def update_record(
        record_id: str,
        patch: Dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
        principal: Principal = Depends(get_current_principal),
    ):
        record = service.update(db, record_id=record_id, principal=principal, patch=patch)
        return ok({singular: present(db, record)}, message=f"{service.label} updated successfully")

    @router.delete("/{record_id}")
    def delete_record(
        record_id: str,
        db: Session = Depends(get_db),
        principal: Principal = Depends(get_current_principal),
    ):
        service.delete(db, record_id=record_id, principal=principal)
        return ok(message=f"{service.label} deleted successfully")

    @router.put("/{record_id}/approve")
    def approve_record(
        record_id: str,
        body: Optional[DecisionRequest] = Body(None),
        db: Session = Depends(get_db),
        principal: Principal = Depends(get_current_principal),
    ):
        record = service.approve(
            db, record_id=record_id, principal=principal, comments=body.comments if body else None
        )
        return ok({singular: present(db, record)}, message=f"{service.label} approved successfully")

    @router.put("/{record_id}/reject")
    def reject_record(
        record_id: str,
        body: Optional[DecisionRequest] = Body(None),
        db: Session = Depends(get_db),
        principal: Principal = Depends(get_current_principal),
    ):
        record = service.reject(
            db, record_id=record_id, principal=principal, comments=body.comments if body else None
        )
        return ok({singular: present(db, record)}, message=f"{service.label} rejected successfully")

    if review_schema is not None:

        @router.put("/{record_id}/review")
        def review_record(
            record_id: str,
            body: review_schema = Body(...),  # type: ignore[valid-type]
            db: Session = Depends(get_db),
            principal: Principal = Depends(get_current_principal),
        ):
            record = service.review(
                db,
                record_id=record_id,
                principal=principal,
                status=body.status,
                comments=body.review_comments,
            )
            return ok({singular: present(db, record)}, message=f"{service.label} reviewed successfully")

    return router
